from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from suite_money.domain.number.big_number import BigNumber


# region Interface


@runtime_checkable
class MoneyContainer(Protocol):
    """Anything that holds amounts in one or more currencies.

    A single monetary value presents itself as a one-entry mapping, so aggregation code can
    consume single values and multi-currency composites (e.g. `MoneyBag`) the same way.
    """

    def amounts_by_currency(self) -> Mapping[str, BigNumber]:
        """Returns the amounts held, keyed by currency code.

        Returns:
            Read-only mapping from currency code to amount.
        """
        ...


# endregion
