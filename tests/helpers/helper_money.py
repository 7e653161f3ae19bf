from __future__ import annotations

from suite_money.domain.monetary.currencies import EUR, JPY, USD
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rational_money import RationalMoney
from suite_money.domain.number.big_number import BigNumberLike


def create_usd(amount: BigNumberLike) -> Money:
    """Create Money in USD at the default scale of 2 digits."""
    return Money(amount, USD)


def create_eur(amount: BigNumberLike) -> Money:
    """Create Money in EUR at the default scale of 2 digits."""
    return Money(amount, EUR)


def create_jpy(amount: BigNumberLike) -> Money:
    return Money(amount, JPY)


def create_rational(amount: BigNumberLike, currency: Currency = USD) -> RationalMoney:
    """Create exact RationalMoney, USD by default."""
    return RationalMoney(amount, currency)
