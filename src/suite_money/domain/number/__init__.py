"""Exact numbers used as monetary amounts."""

from suite_money.domain.number.big_number import BigNumber
from suite_money.domain.number.big_decimal import BigDecimal
from suite_money.domain.number.big_rational import BigRational
from suite_money.domain.number.exceptions import InvalidNumberError

__all__ = [
    "BigNumber",
    "BigDecimal",
    "BigRational",
    "InvalidNumberError",
]
