from __future__ import annotations

from typing import Any


class InvalidNumberError(ValueError):
    """Raised when a value cannot be interpreted as an exact number.

    Attributes:
        value: The offending input, kept as provided.
    """

    def __init__(self, value: Any, reason: str | None = None):
        self.value = value
        self.reason = reason

        message = f"Value {value!r} is not a valid number"
        if reason:
            message += f" - {reason}"

        super().__init__(message)
