"""Cart lookup by customer: each customer owns at most one cart."""

from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart


def find_cart(customer_id):
    """Return the customer's cart, or None if they have never added anything.

    Overlapping first adds can leave a customer with two carts; the oldest one
    is always returned.
    """
    repo = current_domain.repository_for(ShoppingCart)
    carts = repo._dao.query.filter(customer_id=str(customer_id)).order_by("created_at").all().items
    if not carts:
        return None
    # Reload through the repository so items are attached to the aggregate
    return repo.get(carts[0].id)


def find_or_create_cart(customer_id):
    cart = find_cart(customer_id)
    if cart is None:
        cart = ShoppingCart.create(customer_id=customer_id)
    return cart
