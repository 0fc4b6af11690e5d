"""
Order recording: last stage, best effort.

The processor logs a printer failure and carries on; the order has already been routed.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime

import pandas as pd

from order_pipeline.order import Order

logger = logging.getLogger(__name__)

BLOTTER_COLUMNS = [
    "recorded_at",
    "order_id",
    "symbol",
    "side",
    "quantity",
    "price",
    "notional",
    "is_direct_market_access",
]


class OrderPrinter(ABC):
    """Record a routed order (log, blotter, journal...)."""

    @abstractmethod
    def record(self, order: Order) -> None:
        ...


class LoggingOrderPrinter(OrderPrinter):
    """Print each order as one line to a logger (the module logger by default)."""

    def __init__(self, target: logging.Logger | None = None, *, level: int = logging.INFO) -> None:
        self._logger = target or logger
        self._level = level

    def record(self, order: Order) -> None:
        self._logger.log(
            self._level,
            "ORDER id=%s %s %s %s @ %s dma=%s",
            order.order_id,
            order.side.value.upper(),
            order.quantity,
            order.symbol,
            order.price,
            order.is_direct_market_access,
        )


class BlotterOrderPrinter(OrderPrinter):
    """In-memory blotter of recorded orders; export with to_dataframe()."""

    def __init__(self) -> None:
        self._rows: list[dict] = []

    def record(self, order: Order) -> None:
        self._rows.append(
            {
                "recorded_at": datetime.now(),
                "order_id": order.order_id,
                "symbol": order.symbol,
                "side": order.side.value,
                "quantity": order.quantity,
                "price": float(order.price),
                "notional": float(order.notional),
                "is_direct_market_access": order.is_direct_market_access,
            }
        )

    def __len__(self) -> int:
        return len(self._rows)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per recorded order, in recording order."""
        if not self._rows:
            return pd.DataFrame(columns=BLOTTER_COLUMNS)
        return pd.DataFrame(self._rows, columns=BLOTTER_COLUMNS)
