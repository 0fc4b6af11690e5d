"""
Paper order flow example: run a handful of orders through a paper pipeline.

Shows: build_paper_processor wiring, a blotter printer, routing by the DMA flag,
aborts for unfunded and invalid orders, and the summary report.
"""

from __future__ import annotations

import logging

from order_pipeline import Order, Side
from order_pipeline.report import print_summary
from order_pipeline.stages import BlotterOrderPrinter
from order_pipeline.types import Destination
from order_pipeline.wiring import build_paper_processor


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    blotter = BlotterOrderPrinter()
    processor = build_paper_processor(
        balance=50_000,
        known_symbols={"SPY", "QQQ", "IWM"},
        dma_enabled=True,
        printer=blotter,
    )

    orders = [
        Order(symbol="SPY", side=Side.BUY, quantity=10, price="400.00", is_direct_market_access=True),
        Order(symbol="QQQ", side=Side.BUY, quantity=1_000, price="350.00"),
        Order(symbol="IWM", side=Side.SELL, quantity=-1, price="190.00"),
        Order(symbol="QQQ", side=Side.SELL, quantity=25, price="351.25"),
        Order(symbol="XYZ", side=Side.SELL, quantity=5, price="10.00"),
    ]

    print("--- Processing ---")
    results = processor.process_many(orders)
    for r in results:
        where = r.destination.value if r.destination else "-"
        print(f"  {r.order.side.value:<4} {r.order.quantity:>6} {r.order.symbol:<4} -> {r.state.value:<8} {where:<15} {r.error or ''}")

    print()
    print_summary(results)

    print("\n--- Blotter ---")
    print(blotter.to_dataframe()[["order_id", "symbol", "side", "quantity", "price"]])

    print("\n--- Paper router ---")
    for destination in Destination:
        sent = processor.router.get_sent_orders(destination)
        print(f"  {destination.value}: {[o.symbol for _, o in sent]}")
    print(f"  wallet available: {processor.wallet_checker.available}")


if __name__ == "__main__":
    main()
