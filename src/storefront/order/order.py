"""Order aggregate: the priced, immutable record of a completed checkout.

An order is written once by the checkout handler and never modified. Each line
carries the price it was bought at, so later catalogue price changes do not
alter past orders.
"""

import json
import math
from datetime import UTC, datetime

from protean import atomic_change
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.order.events import OrderPlaced


@storefront.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships. Captured at checkout and never updated."""

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


@storefront.entity(part_of="Order")
class OrderLine:
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True, min_value=1)
    price_at_purchase = Float(required=True, min_value=0.0)

    @property
    def line_total(self):
        return self.price_at_purchase * self.quantity


@storefront.aggregate
class Order:
    customer_id = Identifier(required=True)
    items = HasMany(OrderLine)
    total_amount = Float(default=0.0, min_value=0.0)
    shipping_address = ValueObject(ShippingAddress)
    idempotency_key = String(max_length=255)
    placed_at = DateTime()

    @classmethod
    def place(cls, customer_id, lines_data, shipping_address, idempotency_key=None):
        """Create an order from priced lines.

        Args:
            customer_id: The customer placing the order.
            lines_data: List of dicts with product_id, product_name, quantity,
                        price_at_purchase. Must not be empty.
            shipping_address: Dict with street, city, state, postal_code, country.
            idempotency_key: Optional client key identifying this checkout attempt.
        """
        if not lines_data:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        lines = [
            OrderLine(
                product_id=line["product_id"],
                product_name=line["product_name"],
                quantity=line["quantity"],
                price_at_purchase=line["price_at_purchase"],
            )
            for line in lines_data
        ]
        total_amount = sum(line.line_total for line in lines)

        order = cls(
            customer_id=customer_id,
            shipping_address=ShippingAddress(**shipping_address),
            idempotency_key=idempotency_key,
            placed_at=now,
        )
        with atomic_change(order):
            for line in lines:
                order.add_items(line)
            order.total_amount = total_amount

        order._check_total()

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                items=json.dumps(
                    [
                        {
                            "product_id": str(line.product_id),
                            "product_name": line.product_name,
                            "quantity": line.quantity,
                            "price_at_purchase": line.price_at_purchase,
                        }
                        for line in lines
                    ]
                ),
                total_amount=total_amount,
                shipping_address=json.dumps(shipping_address),
                idempotency_key=idempotency_key,
                placed_at=now,
            )
        )
        return order

    def _check_total(self):
        expected = sum(line.line_total for line in self.items)
        if not math.isclose(self.total_amount, expected, abs_tol=1e-9):
            raise ValidationError({"total_amount": ["Order total must equal the sum of its lines"]})
