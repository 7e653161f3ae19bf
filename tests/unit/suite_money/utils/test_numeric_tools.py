from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from suite_money.utils.numeric_tools import as_decimal, as_fraction, is_fraction_str, round_to_scale


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("1.50"), Decimal("1.50")),
        (7, Decimal("7")),
        ("2.50", Decimal("2.50")),
        (" -3 ", Decimal("-3")),
        ("1_000.25", Decimal("1000.25")),
        ("1e3", Decimal("1E+3")),
        (0.1, Decimal("0.1")),
    ],
)
def test_as_decimal_accepts_supported_values(value, expected):
    result = as_decimal(value)
    assert result == expected
    assert str(result) == str(expected)


@pytest.mark.parametrize("value", ["12x", "", "abc", "1/3", "NaN", "Infinity", "1.2.3"])
def test_as_decimal_rejects_malformed_strings(value):
    with pytest.raises(ValueError):
        as_decimal(value)


def test_as_decimal_rejects_non_finite_decimal():
    with pytest.raises(ValueError):
        as_decimal(Decimal("NaN"))
    with pytest.raises(ValueError):
        as_decimal(float("inf"))


@pytest.mark.parametrize("value", [True, None, [1], object()])
def test_as_decimal_rejects_unsupported_types(value):
    with pytest.raises(TypeError):
        as_decimal(value)


def test_is_fraction_str():
    assert is_fraction_str("1/3")
    assert is_fraction_str(" -10/4 ")
    assert not is_fraction_str("1.5")
    assert not is_fraction_str("1/x")


def test_as_fraction_from_various_inputs():
    assert as_fraction("10/4") == Fraction(5, 2)
    assert as_fraction("2.5") == Fraction(5, 2)
    assert as_fraction(Decimal("0.1")) == Fraction(1, 10)
    assert as_fraction(0.1) == Fraction(1, 10)  # via str, not binary float
    assert as_fraction(Fraction(2, 6)) == Fraction(1, 3)


def test_as_fraction_rejects_zero_denominator():
    with pytest.raises(ValueError):
        as_fraction("1/0")


def test_round_to_scale_uses_half_even():
    assert round_to_scale(Fraction("2.345"), 2) == Decimal("2.34")
    assert round_to_scale(Fraction("2.355"), 2) == Decimal("2.36")
    assert round_to_scale(Fraction(1, 3), 4) == Decimal("0.3333")
    assert round_to_scale(Fraction(-5, 2), 0) == Decimal("-2")


def test_round_to_scale_keeps_requested_exponent():
    assert str(round_to_scale(Fraction(5), 2)) == "5.00"
    # Independent of the default 28-digit decimal context
    big = Fraction("123456789012345678901234567890.123")
    assert str(round_to_scale(big, 3)) == "123456789012345678901234567890.123"


def test_round_to_scale_rejects_negative_scale():
    with pytest.raises(ValueError):
        round_to_scale(Fraction(1), -1)


@pytest.mark.parametrize("value", ["1e-20000000", "1e20000000", Decimal("1E-1001"), Decimal("5E+1001"), "0E-5000"])
def test_as_decimal_rejects_extreme_exponents(value):
    with pytest.raises(ValueError):
        as_decimal(value)


def test_as_decimal_accepts_exponent_at_limit():
    assert as_decimal("1e-1000") == Decimal("1E-1000")
    assert as_decimal("1e1000") == Decimal("1E+1000")
