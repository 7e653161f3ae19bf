from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from suite_money.domain.monetary.abstract_money import AbstractMoney
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.number.big_decimal import BigDecimal
from suite_money.domain.number.big_number import BigNumber, BigNumberLike
from suite_money.utils.numeric_tools import round_to_scale

if TYPE_CHECKING:
    from suite_money.domain.monetary.rational_money import RationalMoney


class Money(AbstractMoney):
    """Monetary amount with a fixed scale.

    The amount is rounded to $currency.default_fraction_digits (or to an explicit $scale) using
    banker's rounding (`ROUND_HALF_EVEN`). Rounding is exact and never depends on the active
    decimal context.

    Supports values between -999_999_999_999_999.999999999999999999 and
    +999_999_999_999_999.999999999999999999
    """

    __slots__ = ("_amount", "_currency")

    # Value limits
    MAX_VALUE = Decimal("999_999_999_999_999.999999999999999999")
    MIN_VALUE = Decimal("-999_999_999_999_999.999999999999999999")

    def __init__(self, amount: BigNumberLike, currency: Currency, scale: int | None = None):
        """Initialize Money with amount and currency.

        Args:
            amount: Exact number or anything `BigNumber.of` can parse. Rational amounts are
                rounded like any other.
            currency (Currency): Currency object.
            scale: Digits after the decimal point. Defaults to $currency.default_fraction_digits.

        Raises:
            TypeError: If $currency is not Currency instance.
            ValueError: If $scale is negative or the amount is out of range.
            InvalidNumberError: If $amount is not a valid number.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"Cannot call `Money.__init__` because $currency must be a Currency instance, but provided value is: {currency}")

        target_scale = currency.default_fraction_digits if scale is None else scale

        # Raise: $scale must be a non-negative int
        if not isinstance(target_scale, int) or isinstance(target_scale, bool) or target_scale < 0:
            raise ValueError(f"Cannot call `Money.__init__` because $scale ({scale}) is not a non-negative integer")

        number = BigNumber.of(amount)
        decimal_value = round_to_scale(number.to_fraction(), target_scale)

        # Raise: value must be within allowed range
        if decimal_value > self.MAX_VALUE:
            raise ValueError(f"Cannot call `Money.__init__` because $amount exceeds maximum allowed value {self.MAX_VALUE}, but provided value is: {decimal_value}")
        if decimal_value < self.MIN_VALUE:
            raise ValueError(f"Cannot call `Money.__init__` because $amount is below minimum allowed value {self.MIN_VALUE}, but provided value is: {decimal_value}")

        self._amount = BigDecimal(decimal_value)
        self._currency = currency

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Returns zero in $currency at its default scale."""
        return cls(0, currency)

    @property
    def amount(self) -> BigDecimal:
        """Get the amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def scale(self) -> int:
        return self._amount.scale

    def to_rational(self) -> RationalMoney:
        """Returns the same value as exact `RationalMoney`."""
        from suite_money.domain.monetary.rational_money import RationalMoney

        return RationalMoney(self._amount, self._currency)

    # region Magic

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self._amount} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion
