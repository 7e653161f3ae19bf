from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from typing import Any, TypeAlias

from suite_money.utils.numeric_tools import NumberLike, is_fraction_str

# Anything a comparison accepts on the right-hand side
BigNumberLike: TypeAlias = "BigNumber | NumberLike"


class BigNumber(ABC):
    """Exact number with sign tests and a total-order comparison.

    Concrete variants are `BigDecimal` (finite decimal with a scale) and `BigRational`
    (reduced fraction). Every comparison accepts a `BigNumber` or anything `BigNumber.of` can
    parse, and is exact: scale and representation never matter, so `2.50`, `2.5` and `5/2`
    are all equal.

    Floating-point approximation is never used. Floats are read through `str`, so `0.1`
    means exactly one tenth.
    """

    __slots__ = ()

    @classmethod
    def of(cls, value: BigNumberLike) -> BigNumber:
        """Parses $value into a `BigNumber`.

        When called on `BigNumber` itself, returns $value unchanged if it is already a
        `BigNumber`, a `BigRational` for `Fraction` or "n/d" strings, and a `BigDecimal` for
        everything else. When called on a concrete variant, converts into that variant.

        Args:
            value: Number to parse.

        Returns:
            Parsed number.

        Raises:
            InvalidNumberError: If $value cannot be interpreted as an exact finite number.
        """
        from suite_money.domain.number.big_decimal import BigDecimal
        from suite_money.domain.number.big_rational import BigRational

        if isinstance(value, cls):
            return value

        if cls is BigNumber:
            if isinstance(value, Fraction) or (isinstance(value, str) and is_fraction_str(value)):
                return BigRational(value)
            return BigDecimal(value)

        return cls(value)

    # region Abstract

    @abstractmethod
    def to_fraction(self) -> Fraction:
        """Returns the exact value as `Fraction`."""
        ...

    @abstractmethod
    def sign(self) -> int:
        """Returns -1 if negative, 0 if zero, 1 if positive."""
        ...

    # endregion

    # region Sign

    def is_zero(self) -> bool:
        return self.sign() == 0

    def is_negative(self) -> bool:
        return self.sign() < 0

    def is_negative_or_zero(self) -> bool:
        return self.sign() <= 0

    def is_positive(self) -> bool:
        return self.sign() > 0

    def is_positive_or_zero(self) -> bool:
        return self.sign() >= 0

    # endregion

    # region Comparison

    def compare_to(self, that: BigNumberLike) -> int:
        """Compares this number to $that.

        Args:
            that: Number to compare with. Parsed with `BigNumber.of`.

        Returns:
            -1, 0 or 1 if this number is less than, equal to, or greater than $that.

        Raises:
            InvalidNumberError: If $that is not a valid number.
        """
        mine = self.to_fraction()
        other = BigNumber.of(that).to_fraction()
        return (mine > other) - (mine < other)

    def is_equal_to(self, that: BigNumberLike) -> bool:
        return self.compare_to(that) == 0

    def is_less_than(self, that: BigNumberLike) -> bool:
        return self.compare_to(that) < 0

    def is_less_than_or_equal_to(self, that: BigNumberLike) -> bool:
        return self.compare_to(that) <= 0

    def is_greater_than(self, that: BigNumberLike) -> bool:
        return self.compare_to(that) > 0

    def is_greater_than_or_equal_to(self, that: BigNumberLike) -> bool:
        return self.compare_to(that) >= 0

    # endregion

    # region Arithmetic

    def plus(self, that: BigNumberLike) -> BigNumber:
        """Returns the exact sum of this number and $that.

        Raises:
            InvalidNumberError: If $that is not a valid number.
        """
        from suite_money.domain.number.big_rational import BigRational

        return BigRational(self.to_fraction() + BigNumber.of(that).to_fraction())

    # endregion

    # region Magic

    def __eq__(self, other: Any) -> bool:
        # Floats and strings are left out: their hashes cannot match the exact value
        if isinstance(other, BigNumber):
            return self.to_fraction() == other.to_fraction()
        if isinstance(other, (int, Decimal, Fraction)) and not isinstance(other, bool):
            return self.to_fraction() == other
        return NotImplemented

    def __hash__(self) -> int:
        # Equal to hash() of the same value as int, Decimal or Fraction
        return hash(self.to_fraction())

    def __lt__(self, other: Any) -> bool:
        if not _is_comparable(other):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other: Any) -> bool:
        if not _is_comparable(other):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other: Any) -> bool:
        if not _is_comparable(other):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other: Any) -> bool:
        if not _is_comparable(other):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)

    # endregion


def _is_comparable(other: Any) -> bool:
    """Tells if $other is a number operand; anything else (e.g. a monetary value) gets its own turn."""
    return isinstance(other, (BigNumber, Decimal, Fraction, int, float, str)) and not isinstance(other, bool)
