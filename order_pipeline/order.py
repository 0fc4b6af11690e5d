"""
Order: a trade request as submitted to the pipeline.

Immutable. Stages read it; nothing in the pipeline modifies it.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class Side(Enum):
    BUY = "buy"
    SELL = "sell"


def _new_order_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Order:
    """
    A trade request. Construction does not validate quantity or price;
    that is the validator's job, so bad orders can still be submitted and rejected.
    """

    symbol: str
    side: Side
    quantity: int
    price: Decimal
    is_direct_market_access: bool = False
    order_id: str = field(default_factory=_new_order_id)
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))

    @property
    def notional(self) -> Decimal:
        """Price times quantity."""
        return self.price * self.quantity
