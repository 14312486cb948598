from __future__ import annotations
from typing import Any

from .validation import Validation

_UNSET: Any = object()


class ValidationAssertions:
    """Mixin for ``unittest.TestCase`` comparing validations by rendered message.

    ```python
    class TestUser(ValidationAssertions, unittest.TestCase):
        def test_name(self):
            self.assertInvalid(validate_that("", "name").is_(not_empty), "name.must.not.be.empty")
    ```
    """

    def assertValid(self, v: Validation[Any], value: Any = _UNSET) -> None:
        if not v.is_valid():
            self.fail(f"Expected validation to be valid but was invalid: {v.messages()}")  # type: ignore[attr-defined]
        if value is not _UNSET:
            self.assertEqual(v.value, value)  # type: ignore[attr-defined]

    def assertInvalid(self, v: Validation[Any], *messages: str) -> None:
        if v.is_valid():
            self.fail(f"Expected validation to be invalid but was valid: {v.value!r}")  # type: ignore[attr-defined]
        if messages:
            self.assertEqual(v.messages(), list(messages))  # type: ignore[attr-defined]

    def assertHasErrorMessage(self, v: Validation[Any], message: str) -> None:
        self.assertInvalid(v)
        self.assertIn(message, v.messages())  # type: ignore[attr-defined]
