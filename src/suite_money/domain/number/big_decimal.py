from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

from suite_money.domain.number.big_number import BigNumber, BigNumberLike
from suite_money.domain.number.exceptions import InvalidNumberError
from suite_money.utils.numeric_tools import as_decimal, round_to_scale


def _terminating_scale(fraction: Fraction) -> int | None:
    """Returns the smallest scale that represents $fraction exactly, or None if it never terminates."""
    denominator = fraction.denominator
    twos = fives = 0
    while denominator % 2 == 0:
        denominator //= 2
        twos += 1
    while denominator % 5 == 0:
        denominator //= 5
        fives += 1
    if denominator != 1:
        return None
    return max(twos, fives)


class BigDecimal(BigNumber):
    """Finite decimal number with a non-negative scale.

    The scale (digits after the decimal point) is kept as provided, so `BigDecimal("2.50")`
    prints as "2.50", but compares equal to `BigDecimal("2.5")`.

    Attributes:
        scale (int): Number of digits after the decimal point.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Decimal | int | str | float | BigNumber):
        """Initialize a BigDecimal.

        Args:
            value: Decimal-like scalar, or a `BigNumber` whose value has a finite decimal expansion.

        Raises:
            InvalidNumberError: If $value is not a finite decimal number.
        """
        if isinstance(value, BigDecimal):
            self._value = value._value
            return

        if isinstance(value, BigNumber):
            fraction = value.to_fraction()
            scale = _terminating_scale(fraction)
            # Raise: e.g. 1/3 has no exact decimal representation
            if scale is None:
                raise InvalidNumberError(value, "it has no finite decimal expansion; round it with `to_scale` first")
            self._value = round_to_scale(fraction, scale)
            return

        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError) as e:
            raise InvalidNumberError(value, str(e)) from e

        # Positive exponent (e.g. 1E+3) is expanded, so that $scale is never negative
        if decimal_value.as_tuple().exponent > 0:
            decimal_value = round_to_scale(Fraction(decimal_value), 0)

        self._value = decimal_value

    @property
    def scale(self) -> int:
        return -self._value.as_tuple().exponent

    def to_decimal(self) -> Decimal:
        return self._value

    def to_fraction(self) -> Fraction:
        return Fraction(self._value)

    def sign(self) -> int:
        if self._value.is_zero():
            return 0
        return -1 if self._value.is_signed() else 1

    def compare_to(self, that: BigNumberLike) -> int:
        other = BigNumber.of(that)
        if not isinstance(other, BigDecimal):
            return super().compare_to(other)

        # Decimal ordering is exact and ignores the context precision
        return (self._value > other._value) - (self._value < other._value)

    def to_scale(self, scale: int) -> BigDecimal:
        """Returns this number rounded to $scale digits using banker's rounding.

        Raises:
            ValueError: If $scale is negative.
        """
        return BigDecimal(round_to_scale(self.to_fraction(), scale))

    def plus(self, that: BigNumberLike) -> BigNumber:
        """Returns the exact sum; stays a `BigDecimal` when $that is a decimal too."""
        other = BigNumber.of(that)
        if not isinstance(other, BigDecimal):
            return super().plus(other)

        scale = max(self.scale, other.scale)
        return BigDecimal(round_to_scale(self.to_fraction() + other.to_fraction(), scale))

    def __str__(self) -> str:
        # Fixed-point notation, never scientific
        result = f"{self._value:f}"
        if self._value.is_zero() and result.startswith("-"):
            result = result[1:]
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"
