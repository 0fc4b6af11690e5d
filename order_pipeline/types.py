"""
Pipeline types: processing states, routing destinations, processing result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_pipeline.errors import PipelineError
    from order_pipeline.order import Order


class PipelineState(Enum):
    """Where an order is in the pipeline. DONE and ABORTED are terminal."""

    RECEIVED = "received"
    FUNDS_CHECKED = "funds_checked"
    VALIDATED = "validated"
    ROUTED = "routed"
    RECORDED = "recorded"
    DONE = "done"
    ABORTED = "aborted"


class Destination(Enum):
    """Downstream target chosen by the order's direct-market-access flag."""

    MARKET_GATEWAY = "market_gateway"
    ALGO_ENGINE = "algo_engine"


@dataclass(frozen=True)
class ProcessingResult:
    """
    Outcome of processing one order. Immutable.

    trail lists the states passed through in order. RECORDED means the printer
    stage was attempted; if it failed, record_error holds the exception.
    """

    order: Order
    state: PipelineState
    trail: tuple[PipelineState, ...] = ()
    error: PipelineError | None = None
    destination: Destination | None = None
    record_error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.state == PipelineState.DONE

    def raise_for_error(self) -> None:
        """Raise the error that aborted the order. No-op for completed orders."""
        if self.error is not None:
            raise self.error
