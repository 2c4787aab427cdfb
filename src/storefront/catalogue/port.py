"""Product catalogue port (abstract interface).

The cart and checkout only need to know whether a product exists and what it
costs right now. Adapters answer that from the catalogue repository or, in
tests, from an in-memory table.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSnapshot:
    """Read-only view of a product at lookup time."""

    product_id: str
    name: str
    price: float
    stock: int = 0
    description: str | None = None
    category: str | None = None
    image_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.product_id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "stock": self.stock,
            "category": self.category,
            "image_url": self.image_url,
        }


class ProductCatalogue(ABC):
    """Abstract lookup-by-id capability over the product catalogue."""

    @abstractmethod
    def find(self, product_id: str) -> ProductSnapshot | None:
        """Return the product, or None when it does not exist."""
        ...

    def find_many(self, product_ids) -> dict[str, ProductSnapshot]:
        """Return the products that exist, keyed by id. Missing ids are absent."""
        found = {}
        for product_id in product_ids:
            snapshot = self.find(str(product_id))
            if snapshot is not None:
                found[str(product_id)] = snapshot
        return found
