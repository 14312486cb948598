from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Tuple, TypeVar, Union

from .errors import ValidationException, require
from .logger import default_logger
from .path import ErrorMessage, Path

A = TypeVar("A")
B = TypeVar("B")

Errors = Tuple[ErrorMessage, ...]


class Validation(Generic[A]):
    """Outcome of checking a value: either the value or every error found.

    There are exactly two variants, ``Valid`` and ``Invalid``. Domain
    failures are always carried as an ``Invalid`` value and never raised;
    only contract violations (``None`` where a value or function is
    required) raise ``ValueError``.

    Example:
        ```python
        age = valid(42).map(lambda a: a + 1)              # Valid(43)
        name = invalid("must.not.be.empty").at("name")    # "name.must.not.be.empty"
        age.flat_map(lambda a: name)                      # the Invalid above
        ```
    """

    def is_valid(self) -> bool: raise NotImplementedError
    def is_invalid(self) -> bool: return not self.is_valid()

    def messages(self) -> List[str]:
        return [e.render() for e in self.errors]  # type: ignore[attr-defined]

    def map(self, f: Callable[[A], B]) -> "Validation[B]":
        require(f, "mapper cannot be None")
        if self.is_valid():
            return Valid(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[A], "Validation[B]"]) -> "Validation[B]":
        require(f, "flat_mapper cannot be None")
        if self.is_valid():
            return f(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def fold(self, on_invalid: Callable[[Errors], B], on_valid: Callable[[A], B]) -> B:
        """Collapse both variants into one result.

        Args:
            on_invalid: Called with the error tuple when invalid
            on_valid: Called with the value when valid

        Returns:
            Whatever the selected function returns; the other is never called
        """
        require(on_invalid, "on_invalid cannot be None")
        require(on_valid, "on_valid cannot be None")
        if self.is_valid():
            return on_valid(self.value)  # type: ignore[attr-defined]
        return on_invalid(self.errors)  # type: ignore[attr-defined]

    def map_errors(self, f: Callable[[Errors], Iterable[ErrorMessage]]) -> "Validation[A]":
        require(f, "mapper cannot be None")
        if self.is_valid():
            return self
        return Invalid(f(self.errors))  # type: ignore[attr-defined]

    def at(self, name: str) -> "Validation[A]":
        """Nest every error under ``name``.

        Applied from the inside out: ``v.at("street").at("address")``
        renders as ``"address.street.<message>"``. When the innermost
        segment is a bare list index, as produced by ``sequence``, the name
        is merged into it (``"items[2].<message>"``).

        Args:
            name: Logical name of the validated value, e.g. a record field

        Returns:
            The same validation when valid, otherwise a new ``Invalid``
        """
        path = Path.of(name)
        return self.map_errors(lambda errors: [e.prepend(path) for e in errors])

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_valid() else default  # type: ignore[attr-defined]

    def get_or_raise(self) -> A:
        if self.is_valid():
            return self.value  # type: ignore[attr-defined]
        errors: Errors = self.errors  # type: ignore[attr-defined]
        default_logger().debug("raising validation errors", errors=len(errors))
        raise ValidationException(errors)


@dataclass(frozen=True)
class Valid(Validation[A]):
    value: A

    def __post_init__(self) -> None:
        require(self.value, "Value cannot be None")

    def is_valid(self) -> bool: return True

    @property
    def errors(self) -> Errors: return ()


@dataclass(frozen=True)
class Invalid(Validation[A]):
    errors: Errors

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(require(self.errors, "Errors cannot be None")))

    def is_valid(self) -> bool: return False


def _as_error(e: Union[ErrorMessage, str]) -> ErrorMessage:
    if isinstance(e, ErrorMessage):
        return e
    if isinstance(e, str):
        return ErrorMessage.of(e)
    raise TypeError(f"expected ErrorMessage or str, got {type(e).__name__}")


def valid(value: A) -> Validation[A]:
    return Valid(value)


def invalid(*errors: Union[ErrorMessage, str]) -> Validation[Any]:
    return Invalid(tuple(_as_error(e) for e in errors))


def invalid_from(errors: Iterable[Union[ErrorMessage, str]]) -> Validation[Any]:
    require(errors, "Errors cannot be None")
    return Invalid(tuple(_as_error(e) for e in errors))


# Re-tag the static type only; the runtime object is returned untouched.
def narrow(v: "Validation[A]") -> "Validation[A]":
    return v


def narrow_super(v: "Validation[Any]") -> "Validation[A]":
    return v


def sequence(validations: Iterable[Validation[A]]) -> Validation[Tuple[A, ...]]:
    """Turn independent validations into one validation of all their values.

    Every error of a failing element is prefixed with that element's
    position, so ``[valid(1), invalid("e")]`` fails with ``"[1].e"``. Errors
    keep ascending index order; success needs every element to be valid.
    """
    require(validations, "validations cannot be None")
    values: List[A] = []
    errs: List[ErrorMessage] = []
    failed = False
    for i, v in enumerate(validations):
        require(v, f"validation at index {i} cannot be None")
        if v.is_valid():
            if not failed:
                values.append(v.value)  # type: ignore[attr-defined]
            continue
        failed = True
        tag = Path.at_index(i)
        errs.extend(e.prepend(tag) for e in v.errors)
    if failed:
        return Invalid(tuple(errs))
    return Valid(tuple(values))
