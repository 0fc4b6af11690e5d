"""
Pipeline stages: funds check, validation, routing, recording.

Each stage is an ABC with a paper/in-memory implementation in this package.
Stages return an error instead of raising; None means the stage passed.
"""

from order_pipeline.stages.wallet import CashWalletChecker, WalletChecker
from order_pipeline.stages.validator import BasicOrderValidator, ChainedOrderValidator, OrderValidator
from order_pipeline.stages.router import DMA_ENABLED_ENV, CallableOrderRouter, OrderRouter, PaperOrderRouter
from order_pipeline.stages.printer import BlotterOrderPrinter, LoggingOrderPrinter, OrderPrinter

__all__ = [
    "WalletChecker",
    "CashWalletChecker",
    "OrderValidator",
    "BasicOrderValidator",
    "ChainedOrderValidator",
    "OrderRouter",
    "PaperOrderRouter",
    "CallableOrderRouter",
    "DMA_ENABLED_ENV",
    "OrderPrinter",
    "LoggingOrderPrinter",
    "BlotterOrderPrinter",
]
