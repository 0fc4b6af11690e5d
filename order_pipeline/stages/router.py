"""
Order routing: hand a validated order to the market gateway or the algo engine.

OrderRouter ABC: route_to_market_gateway, route_to_algo_engine. The processor
picks one per order from Order.is_direct_market_access.

Direct market access is gated: PaperOrderRouter rejects gateway orders unless
dma_enabled is True, or, when not passed, ORDER_PIPELINE_DMA_ENABLED is not "false".
"""

from __future__ import annotations

import logging
import os
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable

from order_pipeline.errors import RoutingError
from order_pipeline.order import Order
from order_pipeline.types import Destination

logger = logging.getLogger(__name__)

# Set to "false" to block low-touch gateway routing when dma_enabled is not passed explicitly.
DMA_ENABLED_ENV = "ORDER_PIPELINE_DMA_ENABLED"


class OrderRouter(ABC):
    """
    Two destinations: low-touch market gateway (DMA) and the internal algo engine / SOR.
    Return None once the destination has accepted the order, else a RoutingError.
    """

    @abstractmethod
    def route_to_market_gateway(self, order: Order) -> RoutingError | None:
        ...

    @abstractmethod
    def route_to_algo_engine(self, order: Order) -> RoutingError | None:
        ...


class PaperOrderRouter(OrderRouter):
    """
    Paper router: no connection, keeps every accepted order per destination.
    Each accepted order gets a routing id (paper-<hex>).
    """

    def __init__(self, *, dma_enabled: bool | None = None) -> None:
        if dma_enabled is None:
            dma_enabled = os.environ.get(DMA_ENABLED_ENV, "true").lower() != "false"
        self.dma_enabled = dma_enabled
        self._sent: dict[Destination, list[tuple[str, Order]]] = {d: [] for d in Destination}
        if not self.dma_enabled:
            logger.warning("PaperOrderRouter: direct market access is DISABLED; gateway orders will be rejected.")

    def route_to_market_gateway(self, order: Order) -> RoutingError | None:
        if not self.dma_enabled:
            reason = f"Direct market access disabled. Set {DMA_ENABLED_ENV}=true or pass dma_enabled=True."
            logger.warning("Gateway routing rejected for order %s: %s", order.order_id, reason)
            return RoutingError(Destination.MARKET_GATEWAY, reason)
        self._send(Destination.MARKET_GATEWAY, order)
        return None

    def route_to_algo_engine(self, order: Order) -> RoutingError | None:
        self._send(Destination.ALGO_ENGINE, order)
        return None

    def _send(self, destination: Destination, order: Order) -> None:
        routing_id = f"paper-{uuid.uuid4().hex[:12]}"
        self._sent[destination].append((routing_id, order))
        logger.info(
            "Routed order %s to %s: symbol=%s side=%s qty=%s price=%s routing_id=%s",
            order.order_id,
            destination.value,
            order.symbol,
            order.side.value,
            order.quantity,
            order.price,
            routing_id,
        )

    def get_sent_orders(self, destination: Destination | None = None) -> list[tuple[str, Order]]:
        """Return (routing_id, order) pairs for one destination, or all in destination order."""
        if destination is not None:
            return list(self._sent[destination])
        return [entry for d in Destination for entry in self._sent[d]]


class CallableOrderRouter(OrderRouter):
    """
    Adapt two plain callables (e.g. client send functions) to OrderRouter.
    Anything they raise comes back as a RoutingError carrying the exception as cause.
    """

    def __init__(
        self,
        gateway: Callable[[Order], object],
        algo_engine: Callable[[Order], object],
    ) -> None:
        self._targets: dict[Destination, Callable[[Order], object]] = {
            Destination.MARKET_GATEWAY: gateway,
            Destination.ALGO_ENGINE: algo_engine,
        }

    def route_to_market_gateway(self, order: Order) -> RoutingError | None:
        return self._call(Destination.MARKET_GATEWAY, order)

    def route_to_algo_engine(self, order: Order) -> RoutingError | None:
        return self._call(Destination.ALGO_ENGINE, order)

    def _call(self, destination: Destination, order: Order) -> RoutingError | None:
        try:
            self._targets[destination](order)
        except Exception as e:  # noqa: BLE001
            logger.exception("Routing to %s failed for order %s", destination.value, order.order_id)
            return RoutingError(destination, e)
        return None
