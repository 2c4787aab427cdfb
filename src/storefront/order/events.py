"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out into a new, immutable order."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, product_name, quantity, price_at_purchase}
    total_amount = Float(required=True)
    shipping_address = Text(required=True)  # JSON: address dict
    idempotency_key = String()
    placed_at = DateTime(required=True)
