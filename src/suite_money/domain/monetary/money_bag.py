from __future__ import annotations

import logging
from collections.abc import Iterator
from types import MappingProxyType
from typing import Mapping

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money_container import MoneyContainer
from suite_money.domain.number.big_decimal import BigDecimal
from suite_money.domain.number.big_number import BigNumber

logger = logging.getLogger(__name__)


class MoneyBag:
    """Immutable sum of amounts in any number of currencies.

    Each currency is summed separately; amounts in different currencies are never combined.
    A bag accepts any `MoneyContainer`: single monetary values, other bags, or any custom
    container, and is itself a `MoneyContainer`.

    Examples:
        >>> bag = MoneyBag(Money("10", USD), Money("5", EUR), Money("2.50", USD))
        >>> str(bag.amount_of(USD))
        '12.50'
    """

    __slots__ = ("_amounts",)

    def __init__(self, *containers: MoneyContainer):
        """Initialize the bag from $containers.

        Raises:
            TypeError: If a container does not implement `amounts_by_currency`.
        """
        amounts: dict[str, BigNumber] = {}
        for container in containers:
            # Raise: only MoneyContainer instances can be merged
            if not isinstance(container, MoneyContainer):
                raise TypeError(f"Cannot call `MoneyBag.__init__` because container is not MoneyContainer (got type '{type(container).__name__}')")

            for code, amount in container.amounts_by_currency().items():
                current = amounts.get(code)
                amounts[code] = amount if current is None else current.plus(amount)

        self._amounts = MappingProxyType(amounts)
        logger.debug(f"MoneyBag merged {len(containers)} container(s) into {len(amounts)} currency(ies)")

    def amounts_by_currency(self) -> Mapping[str, BigNumber]:
        """Returns read-only mapping from currency code to summed amount."""
        return self._amounts

    def amount_of(self, currency: Currency | str) -> BigNumber:
        """Returns the summed amount in $currency, or zero if the bag holds none of it.

        Args:
            currency: Currency or currency code.
        """
        code = currency.code if isinstance(currency, Currency) else currency
        return self._amounts.get(code, BigDecimal(0))

    def with_container(self, container: MoneyContainer) -> MoneyBag:
        """Returns a new bag that also holds $container. This bag stays unchanged."""
        return MoneyBag(self, container)

    # region Magic

    def __len__(self) -> int:
        return len(self._amounts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._amounts)

    def __contains__(self, currency: object) -> bool:
        code = currency.code if isinstance(currency, Currency) else currency
        return code in self._amounts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoneyBag):
            return NotImplemented
        return dict(self._amounts) == dict(other._amounts)

    def __hash__(self) -> int:
        return hash(frozenset(self._amounts.items()))

    def __repr__(self) -> str:
        content = ", ".join(f"{amount} {code}" for code, amount in self._amounts.items())
        return f"{self.__class__.__name__}({content})"

    # endregion
