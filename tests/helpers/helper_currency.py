from __future__ import annotations

from suite_money.domain.monetary.currency import Currency, CurrencyType


def create_test_currency(code: str = "TST", default_fraction_digits: int = 2) -> Currency:
    """Create a fiat currency that is not among the predefined ones.

    Args:
        code: Currency code.
        default_fraction_digits: Number of decimal places.

    Returns:
        New Currency named after its code.
    """
    return Currency(code, default_fraction_digits, f"Test currency {code}", CurrencyType.FIAT)
