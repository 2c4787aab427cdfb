"""Read-side join of cart items against the catalogue.

Kept apart from the ShoppingCart aggregate: mutations never need product data,
only display and checkout do. A line whose product has since been deleted is
returned with `product=None` rather than dropped.
"""

from dataclasses import dataclass

from storefront.cart.lookup import find_cart
from storefront.catalogue import get_catalogue
from storefront.catalogue.port import ProductCatalogue, ProductSnapshot


@dataclass(frozen=True)
class ResolvedCartLine:
    product_id: str
    quantity: int
    product: ProductSnapshot | None

    @property
    def available(self) -> bool:
        return self.product is not None

    @property
    def line_total(self) -> float:
        if self.product is None:
            return 0.0
        return self.product.price * self.quantity


def resolve(items, catalogue: ProductCatalogue) -> list[ResolvedCartLine]:
    """Attach current product data to each cart item, preserving cart order."""
    products = catalogue.find_many([str(item.product_id) for item in items])
    return [
        ResolvedCartLine(
            product_id=str(item.product_id),
            quantity=item.quantity,
            product=products.get(str(item.product_id)),
        )
        for item in items
    ]


def cart_contents(customer_id, catalogue: ProductCatalogue | None = None) -> list[ResolvedCartLine]:
    cart = find_cart(customer_id)
    if cart is None:
        return []
    return resolve(cart.items, catalogue or get_catalogue())
