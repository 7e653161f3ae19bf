from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import TypeAlias

# Use where exact number is expected, but native scalars and numeric strings are also acceptable
# (they will be converted to `Decimal` or `Fraction`)
NumberLike: TypeAlias = Decimal | Fraction | int | str | float

# Plain decimal notation only: optional sign, digits, optional fraction part, optional exponent
_DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

# Largest decimal exponent (and magnitude) accepted; far beyond any money value or scale
MAX_DECIMAL_EXPONENT = 1000

# Rational notation like "1/3" or "-10/4"
_FRACTION_PATTERN = re.compile(r"^[+-]?\d+/\d+$")


def is_fraction_str(value: str) -> bool:
    """Tells if $value is written in rational notation, e.g. "1/3"."""
    return _FRACTION_PATTERN.match(value.strip()) is not None


def as_decimal(value: Decimal | int | str | float) -> Decimal:
    """Converts input to a finite `Decimal`.

    Floats are converted via string to avoid binary precision noise, so `0.1` becomes
    `Decimal("0.1")`, not `Decimal(0.1)`.

    Args:
        value: Input value as Decimal, int, float or decimal string.

    Returns:
        Value converted to `Decimal`.

    Raises:
        ValueError: If $value is not a finite decimal number.
        TypeError: If $value has unsupported type.
    """
    # Raise: bool is an int subclass, but True/False are not amounts
    if isinstance(value, bool):
        raise TypeError(f"Cannot call `as_decimal` because $value is bool ({value})")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip().replace("_", "")
        # Raise: only plain decimal notation is accepted
        if not _DECIMAL_PATTERN.match(text):
            raise ValueError(f"Cannot call `as_decimal` because $value ('{value}') is not a decimal number")
        try:
            result = Decimal(text)
        except InvalidOperation as e:
            raise ValueError(f"Cannot call `as_decimal` because $value ('{value}') is not a decimal number") from e
    else:
        raise TypeError(f"Cannot call `as_decimal` because $value has unsupported type '{type(value).__name__}'")

    # Raise: NaN and Infinity have no place in money
    if not result.is_finite():
        raise ValueError(f"Cannot call `as_decimal` because $value ({value}) is not finite")

    # Raise: exact conversion of e.g. 1E-20000000 would build a 10**20000000 integer
    exponent = result.as_tuple().exponent
    if abs(exponent) > MAX_DECIMAL_EXPONENT or abs(result.adjusted()) > MAX_DECIMAL_EXPONENT:
        raise ValueError(f"Cannot call `as_decimal` because $value ({value}) has exponent beyond +/-{MAX_DECIMAL_EXPONENT}")

    return result


def as_fraction(value: NumberLike) -> Fraction:
    """Converts input to an exact `Fraction`.

    Args:
        value: Input value as Fraction, Decimal, int, float, decimal string or "n/d" string.

    Returns:
        Value converted to `Fraction` in lowest terms.

    Raises:
        ValueError: If $value is not a finite number or has zero denominator.
        TypeError: If $value has unsupported type.
    """
    if isinstance(value, Fraction):
        return value

    if isinstance(value, str) and is_fraction_str(value):
        numerator, denominator = value.strip().split("/")
        # Raise: a rational with zero denominator is undefined
        if int(denominator) == 0:
            raise ValueError(f"Cannot call `as_fraction` because $value ('{value}') has zero denominator")
        return Fraction(int(numerator), int(denominator))

    return Fraction(as_decimal(value))


def round_to_scale(value: Fraction, scale: int) -> Decimal:
    """Rounds exact $value to $scale digits after the decimal point.

    Uses banker's rounding (`ROUND_HALF_EVEN`). The result is built from a string, so it is
    never affected by the active decimal context precision.

    Args:
        value: Exact value to round.
        scale: Number of digits after the decimal point (>= 0).

    Returns:
        `Decimal` with exponent exactly -$scale.

    Raises:
        ValueError: If $scale is negative.

    Examples:
        >>> round_to_scale(Fraction(1, 3), 2)
        Decimal('0.33')
        >>> round_to_scale(Fraction(5, 2), 0)
        Decimal('2')
    """
    if scale < 0:
        raise ValueError(f"Cannot call `round_to_scale` because $scale ({scale}) < 0")

    # `round` on Fraction rounds half to even
    scaled = round(value * 10**scale)
    return Decimal(f"{scaled}E-{scale}")
