from __future__ import annotations
from typing import Any, Generic, Iterable, Optional, Tuple, TypeVar

from .errors import require
from .logger import ConsoleLogger, default_logger
from .rule import Rule
from .validation import Validation, narrow_super, sequence

T = TypeVar("T")


class ValidationDSL(Generic[T]):
    def __init__(self, value: T, name: str = "", logger: Optional[ConsoleLogger] = None):
        self.value = value
        self.name = name or ""
        self._logger = logger

    def is_(self, rule: Rule[Any]) -> Validation[T]:
        require(rule, "Rule cannot be None")
        result = rule.test(self.value)
        if self.name:
            result = result.at(self.name)
        if result.is_invalid():
            log = self._logger or default_logger()
            log.debug("value failed validation", field=self.name or "-", errors=len(result.errors))  # type: ignore[attr-defined]
        return narrow_super(result)


class ValidateAllDSL(Generic[T]):
    def __init__(self, values: Iterable[T], name: str = "", logger: Optional[ConsoleLogger] = None):
        self.values = tuple(require(values, "values cannot be None"))
        self.name = name or ""
        self._logger = logger

    def are_all(self, rule: Rule[Any]) -> Validation[Tuple[T, ...]]:
        require(rule, "Rule cannot be None")
        result = sequence(narrow_super(rule.test(v)) for v in self.values)
        if self.name:
            result = result.at(self.name)
        if result.is_invalid():
            log = self._logger or default_logger()
            log.debug(
                "list failed validation",
                field=self.name or "-",
                size=len(self.values),
                errors=len(result.errors),  # type: ignore[attr-defined]
            )
        return result


def validate_that(value: T, name: str = "", logger: Optional[ConsoleLogger] = None) -> ValidationDSL[T]:
    """Start validating a single value, optionally naming it.

    ``validate_that(user.name, "name").is_(rule)`` reports failures as
    ``"name.<message>"``.
    """
    return ValidationDSL(value, name, logger)


def validate_all(values: Iterable[T], name: str = "", logger: Optional[ConsoleLogger] = None) -> ValidateAllDSL[T]:
    """Start validating every element of ``values`` against one shared rule.

    Failing elements are reported by position (``"[2].<message>"``), or
    under ``name`` when given (``"tags[2].<message>"``).
    """
    return ValidateAllDSL(values, name, logger)
