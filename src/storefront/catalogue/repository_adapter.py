"""Catalogue adapter backed by the Product repository of the active domain."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.port import ProductCatalogue, ProductSnapshot
from storefront.catalogue.product import Product


def snapshot_of(product: Product) -> ProductSnapshot:
    return ProductSnapshot(
        product_id=str(product.id),
        name=product.name,
        price=product.price,
        stock=product.stock or 0,
        description=product.description,
        category=product.category,
        image_url=product.image_url,
    )


class RepositoryCatalogue(ProductCatalogue):
    def find(self, product_id: str) -> ProductSnapshot | None:
        try:
            product = current_domain.repository_for(Product).get(product_id)
        except ObjectNotFoundError:
            return None
        return snapshot_of(product)
