"""Monetary domain package.

This package contains classes for handling monetary values and currencies: the shared
comparison core `AbstractMoney`, its `Money` and `RationalMoney` variants, and `MoneyBag`
for amounts in many currencies.
"""

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.exceptions import MoneyMismatchError
from suite_money.domain.monetary.money_container import MoneyContainer
from suite_money.domain.monetary.abstract_money import AbstractMoney
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.rational_money import RationalMoney
from suite_money.domain.monetary.money_bag import MoneyBag

__all__ = [
    "Currency",
    "CurrencyType",
    "MoneyMismatchError",
    "MoneyContainer",
    "AbstractMoney",
    "Money",
    "RationalMoney",
    "MoneyBag",
]
