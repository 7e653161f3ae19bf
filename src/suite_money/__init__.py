__version__ = "0.0.1"

from suite_money.domain.monetary import AbstractMoney, Currency, CurrencyType, Money, MoneyBag, MoneyContainer, MoneyMismatchError, RationalMoney
from suite_money.domain.number import BigDecimal, BigNumber, BigRational, InvalidNumberError

__all__ = [
    "AbstractMoney",
    "Currency",
    "CurrencyType",
    "Money",
    "MoneyBag",
    "MoneyContainer",
    "MoneyMismatchError",
    "RationalMoney",
    "BigDecimal",
    "BigNumber",
    "BigRational",
    "InvalidNumberError",
]
