from __future__ import annotations

import logging

import pytest

from suite_money.domain.monetary.currencies import EUR, GBP, JPY, USD
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.money_bag import MoneyBag
from suite_money.domain.monetary.money_container import MoneyContainer
from suite_money.domain.monetary.rational_money import RationalMoney
from suite_money.domain.number.big_decimal import BigDecimal
from suite_money.domain.number.big_rational import BigRational


def test_bag_sums_per_currency():
    bag = MoneyBag(Money("10", USD), Money("5", EUR), Money("2.50", USD))

    assert len(bag) == 2
    assert str(bag.amount_of(USD)) == "12.50"
    assert str(bag.amount_of("EUR")) == "5.00"
    assert list(bag.amounts_by_currency()) == ["USD", "EUR"]


def test_bag_amounts_by_currency():
    bag = MoneyBag(Money(100, JPY), Money("1.25", GBP))
    assert bag.amounts_by_currency() == {"JPY": 100, "GBP": BigDecimal("1.25")}


def test_bag_treats_single_values_and_bags_alike():
    inner = MoneyBag(Money("1", USD), Money("1", EUR))
    bag = MoneyBag(inner, Money("2", USD), RationalMoney("1/3", EUR))

    assert bag.amount_of(USD) == 3
    assert isinstance(bag.amount_of(EUR), BigRational)
    assert bag.amount_of(EUR) == BigRational("4/3")
    assert isinstance(bag, MoneyContainer)


def test_bag_missing_currency_is_zero():
    bag = MoneyBag(Money(1, USD))
    assert bag.amount_of(JPY).is_zero()
    assert "JPY" not in bag
    assert USD in bag
    assert list(bag) == ["USD"]


def test_bag_is_immutable():
    bag = MoneyBag(Money(1, USD))
    bigger = bag.with_container(Money(2, USD))

    assert bag.amount_of(USD) == 1
    assert bigger.amount_of(USD) == 3
    with pytest.raises(TypeError):
        bag.amounts_by_currency()["USD"] = BigDecimal(5)


def test_bag_equality():
    assert MoneyBag(Money("1.50", USD)) == MoneyBag(RationalMoney("3/2", USD))
    assert MoneyBag(Money(1, USD)) != MoneyBag(Money(1, EUR))
    assert hash(MoneyBag(Money("1.50", USD))) == hash(MoneyBag(RationalMoney("3/2", USD)))


def test_bag_rejects_non_container():
    with pytest.raises(TypeError):
        MoneyBag(Money(1, USD), 5)


def test_bag_logs_merge(caplog):
    with caplog.at_level(logging.DEBUG, logger="suite_money.domain.monetary.money_bag"):
        MoneyBag(Money(1, USD), Money(1, EUR))
    assert "merged 2 container(s) into 2 currency(ies)" in caplog.text
