"""Checkout: converts a customer's cart into an order.

The order is created and the cart is cleared by a single command handler, so
both writes share one unit of work: either both are committed or neither is.
A client-supplied idempotency key makes a retried checkout return the order
the first attempt produced instead of placing a second one.
"""

import json

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.cart.lookup import find_cart
from storefront.cart.resolution import resolve
from storefront.catalogue import get_catalogue
from storefront.domain import storefront
from storefront.errors import EmptyCartError, ProductNotFoundError
from storefront.order.history import find_order_by_key
from storefront.order.order import Order

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class Checkout:
    customer_id = Identifier(required=True)
    shipping_address = Text(required=True)  # JSON: address dict
    idempotency_key = String(max_length=255)


@storefront.command_handler(part_of=Order)
class CheckoutHandler:
    @handle(Checkout)
    def checkout(self, command):
        previous = find_order_by_key(command.customer_id, command.idempotency_key)
        if previous is not None:
            logger.info(
                "Checkout retried, returning existing order",
                order_id=str(previous.id),
                idempotency_key=command.idempotency_key,
            )
            return str(previous.id)

        cart = find_cart(command.customer_id)
        if cart is None or cart.is_empty:
            raise EmptyCartError(command.customer_id)

        lines = resolve(cart.items, get_catalogue())
        missing = [line.product_id for line in lines if not line.available]
        if missing:
            raise ProductNotFoundError(missing)

        shipping_address = (
            json.loads(command.shipping_address)
            if isinstance(command.shipping_address, str)
            else command.shipping_address
        )

        order = Order.place(
            customer_id=command.customer_id,
            lines_data=[
                {
                    "product_id": line.product_id,
                    "product_name": line.product.name,
                    "quantity": line.quantity,
                    "price_at_purchase": line.product.price,
                }
                for line in lines
            ],
            shipping_address=shipping_address,
            idempotency_key=command.idempotency_key,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        current_domain.repository_for(ShoppingCart).add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            total_amount=order.total_amount,
            line_count=len(lines),
        )
        return str(order.id)
