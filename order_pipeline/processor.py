"""
Order processor: run one order through wallet check, validation, routing, recording.

Flow: BUY only → wallet check → validator → market gateway (DMA) or algo engine → printer.
Wallet, validator and router failures abort the order; printer failures are logged only.
Stages are injected; the processor builds none of them and keeps no per-order state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from order_pipeline.errors import InsufficientFundsError, PipelineError, RoutingError, ValidationError
from order_pipeline.order import Order, Side
from order_pipeline.stages.printer import OrderPrinter
from order_pipeline.stages.router import OrderRouter
from order_pipeline.stages.validator import OrderValidator
from order_pipeline.stages.wallet import WalletChecker
from order_pipeline.types import Destination, PipelineState, ProcessingResult

logger = logging.getLogger(__name__)


class OrderProcessor:
    """
    Sequence the four stages for each order.
    States: RECEIVED → FUNDS_CHECKED (buys) → VALIDATED → ROUTED → RECORDED → DONE,
    or ABORTED with the stage's error.
    """

    def __init__(
        self,
        wallet_checker: WalletChecker,
        validator: OrderValidator,
        router: OrderRouter,
        printer: OrderPrinter,
    ) -> None:
        self.wallet_checker = wallet_checker
        self.validator = validator
        self.router = router
        self.printer = printer

    def process(self, order: Order) -> ProcessingResult:
        """Process one order synchronously. Stage failures are returned in the result, not raised."""
        trail = [PipelineState.RECEIVED]
        logger.info(
            "Processing order %s: symbol=%s side=%s qty=%s price=%s dma=%s",
            order.order_id,
            order.symbol,
            order.side.value,
            order.quantity,
            order.price,
            order.is_direct_market_access,
        )

        if order.side == Side.BUY:
            error = _run_stage(self.wallet_checker.check_funds, order, InsufficientFundsError)
            if error is not None:
                return self._abort(order, trail, error)
            trail.append(PipelineState.FUNDS_CHECKED)

        error = _run_stage(self.validator.validate, order, ValidationError)
        if error is not None:
            return self._abort(order, trail, error)
        trail.append(PipelineState.VALIDATED)

        if order.is_direct_market_access:
            destination = Destination.MARKET_GATEWAY
            route = self.router.route_to_market_gateway
        else:
            destination = Destination.ALGO_ENGINE
            route = self.router.route_to_algo_engine
        error = self._route(route, destination, order)
        if error is not None:
            return self._abort(order, trail, error, destination=destination)
        trail.append(PipelineState.ROUTED)

        record_error = self._record(order)
        trail.append(PipelineState.RECORDED)
        trail.append(PipelineState.DONE)
        logger.info("Order %s done: routed to %s", order.order_id, destination.value)
        return ProcessingResult(
            order=order,
            state=PipelineState.DONE,
            trail=tuple(trail),
            destination=destination,
            record_error=record_error,
        )

    def process_many(self, orders: Iterable[Order]) -> list[ProcessingResult]:
        """Process orders one after another; results are in input order."""
        return [self.process(order) for order in orders]

    def _route(
        self,
        route: Callable[[Order], RoutingError | None],
        destination: Destination,
        order: Order,
    ) -> RoutingError | None:
        try:
            return _run_stage(route, order, RoutingError)
        except Exception as e:  # noqa: BLE001
            logger.exception("Router raised for order %s (%s)", order.order_id, destination.value)
            return RoutingError(destination, e)

    def _record(self, order: Order) -> Exception | None:
        try:
            self.printer.record(order)
        except Exception as e:  # noqa: BLE001
            logger.warning("Recording failed for order %s: %s", order.order_id, e)
            return e
        return None

    def _abort(
        self,
        order: Order,
        trail: list[PipelineState],
        error: PipelineError,
        *,
        destination: Destination | None = None,
    ) -> ProcessingResult:
        trail.append(PipelineState.ABORTED)
        logger.warning("Order %s aborted after %s: %s", order.order_id, trail[-2].value, error)
        return ProcessingResult(
            order=order,
            state=PipelineState.ABORTED,
            trail=tuple(trail),
            error=error,
            destination=destination,
        )


def _run_stage(
    stage: Callable[[Order], PipelineError | None],
    order: Order,
    error_type: type[PipelineError],
) -> PipelineError | None:
    """Call a stage. A stage that raises its own error type is treated as if it returned it."""
    try:
        return stage(order)
    except error_type as e:
        return e
