from __future__ import annotations
from typing import Any, Callable, Generic, TypeVar

from .errors import require
from .validation import Validation, invalid, valid

T = TypeVar("T")


class Rule(Generic[T]):
    """Reusable check that turns a value into a ``Validation`` of that value.

    A rule is nothing more than the wrapped function; it holds no state and
    can be shared freely. Rules compose with ``and_`` (``&``) and ``or_``
    (``|``).

    Args:
        test: Function from a value to its ``Validation``

    Example:
        ```python
        not_empty = Rule.of(lambda s: s != "", "must.not.be.empty")
        starts_with_h = Rule.of(lambda s: s.startswith("h"), "must.start.with.h")

        (not_empty & starts_with_h).test("john").messages()  # ["must.start.with.h"]
        (not_empty | starts_with_h)("")                       # Invalid, both messages
        ```
    """

    def __init__(self, test: Callable[[T], Validation[T]]):
        self._test = require(test, "test function cannot be None")

    @staticmethod
    def of(predicate: Callable[[T], bool], message: str) -> "Rule[T]":
        """Build a rule from a predicate and the message reported when it fails.

        Args:
            predicate: Returns True for acceptable values
            message: Base error message, e.g. ``"must.be.positive"``

        Returns:
            A rule yielding ``Valid(value)`` or a single unlocated error

        Raises:
            ValueError: If ``predicate`` or ``message`` is None
        """
        require(predicate, "predicate cannot be None")
        require(message, "message cannot be None")

        def test(value: T) -> Validation[T]:
            return valid(value) if predicate(value) else invalid(message)

        return Rule(test)

    @staticmethod
    def narrow(rule: "Rule[Any]") -> "Rule[T]":
        return rule

    def test(self, value: T) -> Validation[T]:
        return self._test(value)

    def __call__(self, value: T) -> Validation[T]:
        return self._test(value)

    def and_(self, other: "Rule[T]") -> "Rule[T]":
        """First failure wins; ``other`` only runs once ``self`` passed."""
        require(other, "other rule cannot be None")

        def test(value: T) -> Validation[T]:
            first = self.test(value)
            if first.is_invalid():
                return first
            return other.test(value)

        return Rule(test)

    def or_(self, other: "Rule[T]") -> "Rule[T]":
        """First success wins; if both fail, report self's errors then other's."""
        require(other, "other rule cannot be None")

        def test(value: T) -> Validation[T]:
            first = self.test(value)
            if first.is_valid():
                return first
            second = other.test(value)
            if second.is_valid():
                return second
            return first.map_errors(lambda errors: errors + second.errors)  # type: ignore[attr-defined]

        return Rule(test)

    def __and__(self, other: "Rule[T]") -> "Rule[T]":
        return self.and_(other)

    def __or__(self, other: "Rule[T]") -> "Rule[T]":
        return self.or_(other)
