"""Catalogue management: commands and handler.

Products are created, repriced, restocked, and removed here. Removal deletes
the record outright; carts that still reference it are handled at read and
checkout time.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import ProductNotFoundError

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    stock: Integer(default=0, min_value=0)
    category: String(max_length=100)
    image_url: String(max_length=500)
    rating: Float(default=0.0)
    review_count: Integer(default=0)


@storefront.command(part_of="Product")
class ChangeProductPrice:
    product_id: Identifier(required=True)
    price: Float(required=True, min_value=0.0)


@storefront.command(part_of="Product")
class AdjustProductStock:
    product_id: Identifier(required=True)
    stock: Integer(required=True, min_value=0)


@storefront.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


def _load_product(repo, product_id):
    try:
        return repo.get(product_id)
    except ObjectNotFoundError:
        raise ProductNotFoundError(product_id) from None


@storefront.command_handler(part_of=Product)
class ManageCatalogueHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock or 0,
            category=command.category,
            image_url=command.image_url,
            rating=command.rating or 0.0,
            review_count=command.review_count or 0,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(ChangeProductPrice)
    def change_price(self, command):
        repo = current_domain.repository_for(Product)
        product = _load_product(repo, command.product_id)
        product.change_price(command.price)
        repo.add(product)

    @handle(AdjustProductStock)
    def adjust_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = _load_product(repo, command.product_id)
        product.adjust_stock(command.stock)
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _load_product(repo, command.product_id)
        repo._dao.delete(product)
        logger.info("Product removed from catalogue", product_id=str(command.product_id), name=product.name)
