from __future__ import annotations

from fractions import Fraction

from suite_money.domain.number.big_number import BigNumber, BigNumberLike
from suite_money.domain.number.exceptions import InvalidNumberError
from suite_money.utils.numeric_tools import as_fraction


class BigRational(BigNumber):
    """Exact fraction, always kept in lowest terms.

    Examples:
        >>> str(BigRational("10/4"))
        '5/2'
        >>> BigRational("1/3").is_less_than("0.34")
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: BigNumberLike):
        """Initialize a BigRational.

        Args:
            value: Fraction, "n/d" string, `BigNumber`, or any Decimal-like scalar.

        Raises:
            InvalidNumberError: If $value is not a valid finite number or has zero denominator.
        """
        if isinstance(value, BigNumber):
            self._value = value.to_fraction()
            return

        try:
            self._value = as_fraction(value)
        except (ValueError, TypeError, ZeroDivisionError) as e:
            raise InvalidNumberError(value, str(e)) from e

    @classmethod
    def nd(cls, numerator: int, denominator: int) -> BigRational:
        """Creates a rational from $numerator and $denominator.

        Raises:
            InvalidNumberError: If $denominator is zero.
        """
        # Raise: zero denominator
        if denominator == 0:
            raise InvalidNumberError(f"{numerator}/{denominator}", "denominator must not be zero")
        return cls(Fraction(numerator, denominator))

    @property
    def numerator(self) -> int:
        return self._value.numerator

    @property
    def denominator(self) -> int:
        return self._value.denominator

    def to_fraction(self) -> Fraction:
        return self._value

    def sign(self) -> int:
        return (self._value > 0) - (self._value < 0)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"
