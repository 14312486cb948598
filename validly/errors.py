from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, Optional, Tuple, TypeVar

if TYPE_CHECKING:
    from .path import ErrorMessage

A = TypeVar("A")


def require(value: Optional[A], message: str) -> A:
    # Contract violations surface at the call site, never as Invalid.
    if value is None:
        raise ValueError(message)
    return value


class ValidationException(Exception):
    """Raised when a failed validation is forced into a plain value.

    Carries the accumulated errors so callers that prefer exceptions can
    still report every failure with its location.
    """

    def __init__(self, errors: Iterable["ErrorMessage"]):
        self.errors: Tuple["ErrorMessage", ...] = tuple(require(errors, "Errors cannot be None"))
        super().__init__("; ".join(self.messages()))

    def messages(self) -> list[str]:
        return [e.render() for e in self.errors]
