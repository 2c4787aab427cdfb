"""In-memory product catalogue for tests.

Lets cart and checkout be exercised without seeding the Product repository,
and lets a test change prices or delete products between steps.
"""

from uuid import uuid4

from storefront.catalogue.port import ProductCatalogue, ProductSnapshot


class FakeCatalogue(ProductCatalogue):
    def __init__(self) -> None:
        self.products: dict[str, ProductSnapshot] = {}
        self.lookups: list[str] = []

    def add(self, product_id: str | None = None, name: str = "Sample product", price: float = 10.0, stock: int = 10):
        product_id = product_id or str(uuid4())
        self.products[product_id] = ProductSnapshot(product_id=product_id, name=name, price=price, stock=stock)
        return product_id

    def set_price(self, product_id: str, price: float) -> None:
        current = self.products[product_id]
        self.products[product_id] = ProductSnapshot(
            product_id=current.product_id,
            name=current.name,
            price=price,
            stock=current.stock,
        )

    def remove(self, product_id: str) -> None:
        self.products.pop(product_id, None)

    def find(self, product_id: str) -> ProductSnapshot | None:
        self.lookups.append(product_id)
        return self.products.get(product_id)
