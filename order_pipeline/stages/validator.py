"""
Order validation: structural checks plus optional reference-data rules.

Checks stop at the first violation; the error's reason names the field.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection, Sequence

from order_pipeline.errors import ValidationError
from order_pipeline.order import Order


class OrderValidator(ABC):
    """Base class for validators. Return None to accept, or the ValidationError."""

    @abstractmethod
    def validate(self, order: Order) -> ValidationError | None:
        ...


class BasicOrderValidator(OrderValidator):
    """
    Checks, in order: non-empty symbol, positive quantity, non-negative price.
    Optional reference data: known_symbols (instrument universe) and max_quantity.
    """

    def __init__(
        self,
        *,
        known_symbols: Collection[str] | None = None,
        max_quantity: int | None = None,
    ) -> None:
        self.known_symbols = frozenset(known_symbols) if known_symbols is not None else None
        self.max_quantity = max_quantity

    def validate(self, order: Order) -> ValidationError | None:
        if not order.symbol or not order.symbol.strip():
            return ValidationError("symbol", "symbol is empty")
        if order.quantity <= 0:
            return ValidationError("quantity", f"quantity must be positive, got {order.quantity}")
        if not order.price.is_finite() or order.price < 0:
            return ValidationError("price", f"price must be finite and non-negative, got {order.price}")
        if self.known_symbols is not None and order.symbol not in self.known_symbols:
            return ValidationError("symbol", f"unknown symbol {order.symbol!r}")
        if self.max_quantity is not None and order.quantity > self.max_quantity:
            return ValidationError("quantity", f"quantity {order.quantity} > max_quantity {self.max_quantity}")
        return None


class ChainedOrderValidator(OrderValidator):
    """Run validators in order; the first error wins."""

    def __init__(self, validators: Sequence[OrderValidator]) -> None:
        self.validators: list[OrderValidator] = list(validators)

    def validate(self, order: Order) -> ValidationError | None:
        for validator in self.validators:
            error = validator.validate(order)
            if error is not None:
                return error
        return None
