"""
order-pipeline: synchronous, composable order processing pipeline.

Funds check, validation, routing and recording are separate stages injected
into one orchestrator. No ledger, exchange, or persistence integrations.
"""

__version__ = "0.1.0"

from order_pipeline.order import Order, Side
from order_pipeline.errors import (
    InsufficientFundsError,
    PipelineError,
    RoutingError,
    ValidationError,
)
from order_pipeline.types import Destination, PipelineState, ProcessingResult
from order_pipeline.processor import OrderProcessor

__all__ = [
    "Order",
    "Side",
    "PipelineError",
    "InsufficientFundsError",
    "ValidationError",
    "RoutingError",
    "Destination",
    "PipelineState",
    "ProcessingResult",
    "OrderProcessor",
]
