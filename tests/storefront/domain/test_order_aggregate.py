"""Tests for the Order aggregate: priced snapshot created at checkout."""

import json

import pytest
from protean.exceptions import ValidationError
from storefront.order.events import OrderPlaced
from storefront.order.order import Order

ADDRESS = {
    "street": "123 Main St",
    "city": "Anytown",
    "state": None,
    "postal_code": "12345",
    "country": "US",
}


def _lines():
    return [
        {"product_id": "p1", "product_name": "Widget", "quantity": 2, "price_at_purchase": 10.0},
        {"product_id": "p2", "product_name": "Gadget", "quantity": 1, "price_at_purchase": 5.0},
    ]


class TestPlaceOrder:
    def test_total_is_sum_of_lines(self):
        order = Order.place(customer_id="cust-001", lines_data=_lines(), shipping_address=ADDRESS)
        assert order.total_amount == pytest.approx(25.0)
        assert len(order.items) == 2

    def test_total_is_not_rounded(self):
        lines = [{"product_id": "p1", "product_name": "Pen", "quantity": 3, "price_at_purchase": 0.333}]
        order = Order.place(customer_id="cust-001", lines_data=lines, shipping_address=ADDRESS)
        assert order.total_amount == pytest.approx(0.999)

    def test_lines_capture_price_at_purchase(self):
        order = Order.place(customer_id="cust-001", lines_data=_lines(), shipping_address=ADDRESS)
        line = order.items[0]
        assert line.product_name == "Widget"
        assert line.price_at_purchase == 10.0
        assert line.line_total == 20.0

    def test_shipping_address_recorded(self):
        order = Order.place(customer_id="cust-001", lines_data=_lines(), shipping_address=ADDRESS)
        assert order.shipping_address.city == "Anytown"
        assert order.shipping_address.postal_code == "12345"

    def test_empty_lines_rejected(self):
        with pytest.raises(ValidationError):
            Order.place(customer_id="cust-001", lines_data=[], shipping_address=ADDRESS)

    def test_incomplete_address_rejected(self):
        with pytest.raises(ValidationError):
            Order.place(
                customer_id="cust-001",
                lines_data=_lines(),
                shipping_address={"street": "123 Main St", "country": "US"},
            )

    def test_raises_order_placed_event(self):
        order = Order.place(
            customer_id="cust-001",
            lines_data=_lines(),
            shipping_address=ADDRESS,
            idempotency_key="key-1",
        )
        placed = [e for e in order._events if isinstance(e, OrderPlaced)]
        assert len(placed) == 1
        event = placed[0]
        assert event.order_id == str(order.id)
        assert event.total_amount == pytest.approx(25.0)
        assert event.idempotency_key == "key-1"
        assert [i["product_id"] for i in json.loads(event.items)] == ["p1", "p2"]
