"""
Tests for order_pipeline core types: Order, errors, ProcessingResult.
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from order_pipeline import (
    Destination,
    InsufficientFundsError,
    Order,
    PipelineError,
    PipelineState,
    ProcessingResult,
    RoutingError,
    Side,
    ValidationError,
)


# --- Order ---


def test_order_creation():
    o = Order(symbol="SPY", side=Side.BUY, quantity=10, price=Decimal("400.50"), is_direct_market_access=True)
    assert o.symbol == "SPY"
    assert o.side == Side.BUY
    assert o.quantity == 10
    assert o.price == Decimal("400.50")
    assert o.is_direct_market_access is True
    assert o.timestamp is None


def test_order_defaults_to_algo_routing_and_generates_id():
    a = Order(symbol="SPY", side=Side.SELL, quantity=1, price=Decimal("1"))
    b = Order(symbol="SPY", side=Side.SELL, quantity=1, price=Decimal("1"))
    assert a.is_direct_market_access is False
    assert a.order_id
    assert a.order_id != b.order_id


def test_order_keeps_explicit_id():
    o = Order(symbol="SPY", side=Side.SELL, quantity=1, price=Decimal("1"), order_id="ord-1")
    assert o.order_id == "ord-1"


def test_order_coerces_price_to_decimal():
    assert Order(symbol="SPY", side=Side.BUY, quantity=1, price=0.1).price == Decimal("0.1")
    assert Order(symbol="SPY", side=Side.BUY, quantity=1, price="-2.5").price == Decimal("-2.5")
    assert Order(symbol="SPY", side=Side.BUY, quantity=1, price=3).price == Decimal("3")


def test_order_notional():
    o = Order(symbol="SPY", side=Side.BUY, quantity=3, price="10.25")
    assert o.notional == Decimal("30.75")


def test_order_immutable():
    o = Order(symbol="SPY", side=Side.BUY, quantity=1, price="1")
    with pytest.raises(FrozenInstanceError):
        o.quantity = 2


def test_order_accepts_invalid_values_for_validator_to_reject():
    o = Order(symbol="", side=Side.SELL, quantity=-1, price="-1")
    assert o.quantity == -1


# --- Errors ---


def test_errors_share_base_class():
    for err in (
        InsufficientFundsError("o1", Decimal("10"), Decimal("5")),
        ValidationError("quantity"),
        RoutingError(Destination.ALGO_ENGINE, "down"),
    ):
        assert isinstance(err, PipelineError)
        assert isinstance(err, Exception)


def test_insufficient_funds_error_fields():
    err = InsufficientFundsError("o1", Decimal("10"), Decimal("5"))
    assert err.order_id == "o1"
    assert err.required == Decimal("10")
    assert err.available == Decimal("5")
    assert "o1" in str(err)


def test_validation_error_message():
    assert str(ValidationError("quantity")) == "quantity"
    err = ValidationError("price", "price must be non-negative")
    assert err.reason == "price"
    assert str(err) == "price: price must be non-negative"


def test_routing_error_keeps_cause():
    cause = ConnectionError("gateway down")
    err = RoutingError(Destination.MARKET_GATEWAY, cause)
    assert err.destination == Destination.MARKET_GATEWAY
    assert err.cause is cause
    assert "market_gateway" in str(err)


# --- ProcessingResult ---


def test_processing_result_ok_and_raise_for_error():
    o = Order(symbol="SPY", side=Side.SELL, quantity=1, price="1")
    done = ProcessingResult(order=o, state=PipelineState.DONE)
    assert done.ok
    done.raise_for_error()

    err = ValidationError("symbol")
    aborted = ProcessingResult(order=o, state=PipelineState.ABORTED, error=err)
    assert not aborted.ok
    with pytest.raises(ValidationError) as exc_info:
        aborted.raise_for_error()
    assert exc_info.value is err
