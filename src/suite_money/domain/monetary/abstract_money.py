from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Mapping, TypeAlias

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.exceptions import MoneyMismatchError
from suite_money.domain.number.big_number import BigNumber, BigNumberLike

# Right-hand side of every comparison: another monetary value or a raw number
MoneyOperand: TypeAlias = "AbstractMoney | BigNumberLike"


class AbstractMoney(ABC):
    """Base class for `Money` and `RationalMoney`.

    A monetary value binds one exact amount to one currency. Subclasses only provide
    $amount and $currency; sign tests and comparisons are shared and work purely in terms of
    these two properties.

    Comparisons accept either another monetary value or a raw number:

    - Another monetary value must be in the same currency, otherwise `MoneyMismatchError`
      is raised before any numeric comparison happens.
    - A raw number (`BigNumber`, `Decimal`, `Fraction`, int, float or numeric string) is
      taken as already expressed in this value's currency. No currency check is done, so
      `usd_5.is_equal_to(5)` is True. Use monetary values on both sides where the currency
      of the operand is not known for sure.

    Comparisons are exact and scale-independent: 2.50 USD equals 2.5 USD.

    Implements `MoneyContainer`.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def amount(self) -> BigNumber:
        """Get the amount."""
        ...

    @property
    @abstractmethod
    def currency(self) -> Currency:
        """Get the currency."""
        ...

    def amounts_by_currency(self) -> Mapping[str, BigNumber]:
        """Returns this value as a one-entry mapping {currency code: amount}."""
        return MappingProxyType({self.currency.code: self.amount})

    # region Sign

    def sign(self) -> int:
        """Returns the sign of this money.

        Returns:
            -1 if the amount is negative, 0 if zero, 1 if positive.
        """
        return self.amount.sign()

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def is_negative(self) -> bool:
        return self.amount.is_negative()

    def is_negative_or_zero(self) -> bool:
        return self.amount.is_negative_or_zero()

    def is_positive(self) -> bool:
        return self.amount.is_positive()

    def is_positive_or_zero(self) -> bool:
        return self.amount.is_positive_or_zero()

    # endregion

    # region Comparison

    def compare_to(self, that: MoneyOperand) -> int:
        """Compares this money to $that.

        Args:
            that: Monetary value in the same currency, or a raw number.

        Returns:
            -1, 0 or 1 if this money is less than, equal to, or greater than $that.

        Raises:
            MoneyMismatchError: If $that is a monetary value in a different currency.
            InvalidNumberError: If $that is not a valid number.
        """
        return self.amount.compare_to(self._resolve_operand(that))

    def is_equal_to(self, that: MoneyOperand) -> bool:
        """Returns whether this money is equal to $that. Raises like `compare_to`."""
        return self.amount.is_equal_to(self._resolve_operand(that))

    def is_less_than(self, that: MoneyOperand) -> bool:
        """Returns whether this money is less than $that. Raises like `compare_to`."""
        return self.amount.is_less_than(self._resolve_operand(that))

    def is_less_than_or_equal_to(self, that: MoneyOperand) -> bool:
        """Returns whether this money is less than or equal to $that. Raises like `compare_to`."""
        return self.amount.is_less_than_or_equal_to(self._resolve_operand(that))

    def is_greater_than(self, that: MoneyOperand) -> bool:
        """Returns whether this money is greater than $that. Raises like `compare_to`."""
        return self.amount.is_greater_than(self._resolve_operand(that))

    def is_greater_than_or_equal_to(self, that: MoneyOperand) -> bool:
        """Returns whether this money is greater than or equal to $that. Raises like `compare_to`."""
        return self.amount.is_greater_than_or_equal_to(self._resolve_operand(that))

    def _resolve_operand(self, that: MoneyOperand) -> BigNumberLike:
        """Returns the amount to compare with.

        If $that is a monetary value, its currency is checked against $self.currency and its
        amount is returned. Anything else is returned unchanged and left to the number parser.

        Raises:
            MoneyMismatchError: If $that is a monetary value in a different currency.
        """
        if isinstance(that, AbstractMoney):
            # Raise: monetary values in different currencies are not comparable
            if not that.currency.is_same_as(self.currency):
                raise MoneyMismatchError.currency_mismatch(self.currency, that.currency)
            return that.amount

        return that

    # endregion

    # region Magic

    def __eq__(self, other: Any) -> bool:
        # Unlike `is_equal_to`, never raises: different currencies are simply not equal
        if not isinstance(other, AbstractMoney):
            return NotImplemented
        return self.currency.is_same_as(other.currency) and self.amount == other.amount

    def __hash__(self) -> int:
        return hash((self.currency.code, self.amount))

    def __lt__(self, other: MoneyOperand) -> bool:
        return self.is_less_than(other)

    def __le__(self, other: MoneyOperand) -> bool:
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other: MoneyOperand) -> bool:
        return self.is_greater_than(other)

    def __ge__(self, other: MoneyOperand) -> bool:
        return self.is_greater_than_or_equal_to(other)

    # endregion
