"""
Errors that abort an order.

Stages return these instead of raising them; the processor puts the one that
stopped an order into its ProcessingResult. They are real exceptions so a caller
can still raise them (ProcessingResult.raise_for_error).
"""

from __future__ import annotations

from decimal import Decimal

from order_pipeline.types import Destination


class PipelineError(Exception):
    """Base class for stage failures that abort an order."""


class InsufficientFundsError(PipelineError):
    """Available balance does not cover a buy order's notional."""

    def __init__(self, order_id: str, required: Decimal, available: Decimal) -> None:
        super().__init__(f"Insufficient funds for order {order_id}: required {required}, available {available}")
        self.order_id = order_id
        self.required = required
        self.available = available


class ValidationError(PipelineError):
    """Order failed a structural or reference-data check. reason names the offending field."""

    def __init__(self, reason: str, detail: str | None = None) -> None:
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason
        self.detail = detail


class RoutingError(PipelineError):
    """Order could not be handed to its destination."""

    def __init__(self, destination: Destination, cause: BaseException | str | None = None) -> None:
        super().__init__(f"Routing to {destination.value} failed: {cause}")
        self.destination = destination
        self.cause = cause
