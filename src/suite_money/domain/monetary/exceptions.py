from __future__ import annotations

from suite_money.domain.monetary.currency import Currency


class MoneyMismatchError(ValueError):
    """Raised when two monetary values in different currencies are compared.

    Attributes:
        left (Currency): Currency of the value the operation was called on.
        right (Currency): Currency of the operand.
    """

    def __init__(self, left: Currency, right: Currency, message: str):
        self.left = left
        self.right = right
        super().__init__(message)

    @classmethod
    def currency_mismatch(cls, left: Currency, right: Currency) -> MoneyMismatchError:
        """Creates the error for monetary values in $left and $right currencies."""
        return cls(left, right, f"The monetary values are in different currencies: {left.code} and {right.code}")
