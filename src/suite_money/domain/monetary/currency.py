from __future__ import annotations

from enum import Enum
from typing import Any


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


class Currency:
    """Represents a currency identified by its code.

    Identity consists of $code only: two currencies with the same $code are the same currency,
    regardless of their other attributes. The code is case-sensitive.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC").
        default_fraction_digits (int): Number of decimal places used by `Money` (0-18).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY).
    """

    __slots__ = ("_code", "_default_fraction_digits", "_name", "_currency_type")

    MAX_FRACTION_DIGITS = 18

    def __init__(self, code: str, default_fraction_digits: int, name: str, currency_type: CurrencyType = CurrencyType.FIAT):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "BTC"). Surrounding whitespace is removed.
            default_fraction_digits (int): Number of decimal places (0-18).
            name (str): Full currency name.
            currency_type (CurrencyType): Type of currency.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If $currency_type is not CurrencyType instance.
        """
        # Raise: $code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"Cannot call `Currency.__init__` because $code must be a non-empty string, but provided value is: '{code}'")

        # Raise: $default_fraction_digits must be an int in the supported range
        digits_ok = isinstance(default_fraction_digits, int) and not isinstance(default_fraction_digits, bool)
        if not digits_ok or not 0 <= default_fraction_digits <= self.MAX_FRACTION_DIGITS:
            raise ValueError(f"Cannot call `Currency.__init__` because $default_fraction_digits must be an integer between 0 and {self.MAX_FRACTION_DIGITS}, but provided value is: {default_fraction_digits}")

        # Raise: $name must be a non-empty string
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Cannot call `Currency.__init__` because $name must be a non-empty string, but provided value is: '{name}'")

        # Raise: $currency_type must be CurrencyType
        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"Cannot call `Currency.__init__` because $currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code.strip()
        self._default_fraction_digits = default_fraction_digits
        self._name = name.strip()
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def default_fraction_digits(self) -> int:
        """Get the number of decimal places used by `Money` in this currency."""
        return self._default_fraction_digits

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def is_fiat(self) -> bool:
        return self._currency_type == CurrencyType.FIAT

    @property
    def is_crypto(self) -> bool:
        return self._currency_type == CurrencyType.CRYPTO

    @property
    def is_commodity(self) -> bool:
        return self._currency_type == CurrencyType.COMMODITY

    def is_same_as(self, other: Currency | str) -> bool:
        """Check if $other identifies the same currency.

        Args:
            other: Another Currency, or a currency code.

        Returns:
            bool: True if codes are equal.

        Raises:
            TypeError: If $other is neither Currency nor str.
        """
        if isinstance(other, Currency):
            return self._code == other._code
        if isinstance(other, str):
            return self._code == other
        raise TypeError(f"Cannot call `is_same_as` because $other is not Currency or str (got type '{type(other).__name__}')")

    # region Magic

    def __eq__(self, other: Any) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.is_same_as(other)

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self._code)

    def __str__(self) -> str:
        """Return string representation."""
        return self._code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.default_fraction_digits}, '{self.name}', {self.currency_type})"

    # endregion
