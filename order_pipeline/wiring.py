"""
Wiring: build a complete paper pipeline from keyword arguments.

Embedding applications that front a real ledger or gateway construct
OrderProcessor directly with their own stages.
"""

from __future__ import annotations

from collections.abc import Collection
from decimal import Decimal

from order_pipeline.processor import OrderProcessor
from order_pipeline.stages.printer import LoggingOrderPrinter, OrderPrinter
from order_pipeline.stages.router import PaperOrderRouter
from order_pipeline.stages.validator import BasicOrderValidator
from order_pipeline.stages.wallet import CashWalletChecker


def build_paper_processor(
    balance: Decimal | float | int = 0,
    *,
    known_symbols: Collection[str] | None = None,
    max_quantity: int | None = None,
    dma_enabled: bool | None = None,
    printer: OrderPrinter | None = None,
) -> OrderProcessor:
    """
    Paper wallet with `balance`, basic validator, paper router, logging printer
    (unless `printer` is given). dma_enabled=None defers to ORDER_PIPELINE_DMA_ENABLED.
    The stages are reachable as attributes of the returned processor.
    """
    return OrderProcessor(
        wallet_checker=CashWalletChecker(balance),
        validator=BasicOrderValidator(known_symbols=known_symbols, max_quantity=max_quantity),
        router=PaperOrderRouter(dma_enabled=dma_enabled),
        printer=printer if printer is not None else LoggingOrderPrinter(),
    )
