"""Cart item management: commands and handler.

Every command names the customer whose cart it targets; the cart is looked up
(or created on first add) from that id.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.cart.lookup import find_cart, find_or_create_cart
from storefront.catalogue import get_catalogue
from storefront.domain import storefront
from storefront.errors import CartItemNotFoundError, ProductNotFoundError

logger = structlog.get_logger(__name__)


@storefront.command(part_of="ShoppingCart")
class AddToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@storefront.command(part_of="ShoppingCart")
class SetCartQuantity:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@storefront.command(part_of="ShoppingCart")
class RemoveFromCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        if get_catalogue().find(str(command.product_id)) is None:
            raise ProductNotFoundError(command.product_id)

        cart = find_or_create_cart(command.customer_id)
        cart.add_item(product_id=command.product_id, quantity=command.quantity or 1)
        current_domain.repository_for(ShoppingCart).add(cart)

        logger.debug(
            "Item added to cart",
            cart_id=str(cart.id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return str(cart.id)

    @handle(SetCartQuantity)
    def set_cart_quantity(self, command):
        cart = find_cart(command.customer_id)
        if cart is None:
            raise CartItemNotFoundError(command.product_id)

        cart.set_quantity(product_id=command.product_id, quantity=command.quantity)
        current_domain.repository_for(ShoppingCart).add(cart)
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = find_cart(command.customer_id)
        if cart is None:
            return None

        if cart.remove_item(product_id=command.product_id):
            current_domain.repository_for(ShoppingCart).add(cart)
        return str(cart.id)
