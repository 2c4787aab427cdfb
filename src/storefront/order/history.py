"""Order history: read queries scoped to the requesting customer."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.errors import OrderNotFoundError
from storefront.order.order import Order


def orders_for(customer_id):
    """Return the customer's orders, newest first."""
    repo = current_domain.repository_for(Order)
    found = repo._dao.query.filter(customer_id=str(customer_id)).order_by("-placed_at").all().items
    return [repo.get(order.id) for order in found]


def get_order(customer_id, order_id):
    """Fetch one of the customer's orders. Other customers' orders read as missing."""
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFoundError(order_id) from None

    if str(order.customer_id) != str(customer_id):
        raise OrderNotFoundError(order_id)
    return order


def find_order_by_key(customer_id, idempotency_key):
    """Return the order a previous checkout with this key produced, if any."""
    if not idempotency_key:
        return None

    repo = current_domain.repository_for(Order)
    found = repo._dao.query.filter(
        customer_id=str(customer_id),
        idempotency_key=idempotency_key,
    ).all().items
    return repo.get(found[0].id) if found else None
