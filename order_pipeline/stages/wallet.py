"""
Wallet check: does the client have the cash for a buy order?

WalletChecker ABC: check_funds. CashWalletChecker keeps a single in-memory cash
account and reserves the notional of every order it approves.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal

from order_pipeline.errors import InsufficientFundsError
from order_pipeline.order import Order

logger = logging.getLogger(__name__)


class WalletChecker(ABC):
    """
    Funds check for buy orders. The processor never calls it for sells.
    Implementations may reserve or debit funds in whatever ledger they front.
    """

    @abstractmethod
    def check_funds(self, order: Order) -> InsufficientFundsError | None:
        """Return None if the order is funded, else the InsufficientFundsError."""
        ...


class CashWalletChecker(WalletChecker):
    """
    Paper wallet: one cash balance, reservations keyed by order id.
    Available = balance - sum(reservations). Approving an order reserves its notional.
    """

    def __init__(self, balance: Decimal | float | int = 0) -> None:
        self._balance = Decimal(str(balance))
        self._reservations: dict[str, Decimal] = {}

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def available(self) -> Decimal:
        return self._balance - sum(self._reservations.values(), Decimal(0))

    def check_funds(self, order: Order) -> InsufficientFundsError | None:
        """
        Reserve the order's notional if available cash covers it.
        A non-finite or non-positive notional reserves nothing; the validator rejects such orders.
        """
        required = order.notional
        if not required.is_finite() or required <= 0:
            logger.debug("Nothing to reserve for order %s (notional %s)", order.order_id, required)
            return None
        available = self.available
        if available < required:
            logger.info(
                "Funds check failed: order=%s required=%s available=%s",
                order.order_id,
                required,
                available,
            )
            return InsufficientFundsError(order.order_id, required, available)
        self._reservations[order.order_id] = self._reservations.get(order.order_id, Decimal(0)) + required
        logger.debug("Reserved %s for order %s (available now %s)", required, order.order_id, self.available)
        return None

    def release(self, order_id: str) -> Decimal:
        """Drop the reservation for order_id. Returns the amount released (0 if none)."""
        return self._reservations.pop(order_id, Decimal(0))

    def get_reservations(self) -> dict[str, Decimal]:
        """Return current reservations (order id -> amount)."""
        return dict(self._reservations)
