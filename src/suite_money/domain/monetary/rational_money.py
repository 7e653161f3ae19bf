from __future__ import annotations

from suite_money.domain.monetary.abstract_money import AbstractMoney
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money import Money
from suite_money.domain.number.big_number import BigNumberLike
from suite_money.domain.number.big_rational import BigRational


class RationalMoney(AbstractMoney):
    """Monetary amount kept as an exact fraction, never rounded.

    Use it for intermediate results such as 1/3 of a price; convert with `to_money` when a
    fixed scale is needed.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: BigNumberLike, currency: Currency):
        """Initialize RationalMoney with amount and currency.

        Args:
            amount: Exact number, "n/d" string, or any Decimal-like scalar.
            currency (Currency): Currency object.

        Raises:
            TypeError: If $currency is not Currency instance.
            InvalidNumberError: If $amount is not a valid number.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"Cannot call `RationalMoney.__init__` because $currency must be a Currency instance, but provided value is: {currency}")

        self._amount = BigRational(amount)
        self._currency = currency

    @property
    def amount(self) -> BigRational:
        """Get the amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def to_money(self, scale: int | None = None) -> Money:
        """Rounds this value into `Money`.

        Args:
            scale: Digits after the decimal point. Defaults to $currency.default_fraction_digits.

        Returns:
            Money rounded with banker's rounding.
        """
        return Money(self._amount, self._currency, scale)

    # region Magic

    def __str__(self) -> str:
        """Return string like '1/3 USD'."""
        return f"{self._amount} {self._currency.code}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion
