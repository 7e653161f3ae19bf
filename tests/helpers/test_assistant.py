from __future__ import annotations

from tests.helpers import helper_currency, helper_money


class TestAssistant:
    """Central access point for ready-made domain objects in tests.

    Attributes:
        currency: Module with helper functions for Currency fixtures.
        money: Module with helper functions for Money and RationalMoney fixtures.

    This assistant is intentionally lightweight and stateless: all domain objects
    are created fresh by calling helper functions, so there is no shared mutable
    state between tests.
    """

    __test__ = False

    def __init__(self) -> None:
        self.currency = helper_currency
        self.money = helper_money


# Singleton entry point for tests. This object itself carries no mutable domain
# state; it only exposes factory namespaces, so it is safe to share.
TEST_ASSISTANT = TestAssistant()
