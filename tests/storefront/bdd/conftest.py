"""Shared BDD fixtures and step definitions for the storefront."""

import json

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then, when
from storefront.cart.items import AddToCart
from storefront.cart.lookup import find_cart
from storefront.checkout.checkout import Checkout
from storefront.order.history import orders_for
from storefront.order.order import Order


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def customer_id():
    return "cust-bdd-001"


@pytest.fixture()
def outcome():
    """Container for the result or error of the last checkout attempt."""
    return {"order_id": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue has product "{product_id}" priced at {price:f}'))
def catalogue_product(fake_catalogue, product_id, price):
    fake_catalogue.add(product_id, name=f"Product {product_id}", price=price)


@given(parsers.cfparse('the customer has {qty:d} of "{product_id}" in the cart'))
def cart_holds(customer_id, qty, product_id):
    current_domain.process(
        AddToCart(customer_id=customer_id, product_id=product_id, quantity=qty),
        asynchronous=False,
    )


@given(parsers.cfparse('product "{product_id}" is removed from the catalogue'))
def product_removed(fake_catalogue, product_id):
    fake_catalogue.remove(product_id)


# ---------------------------------------------------------------------------
# Shared When / Then steps
# ---------------------------------------------------------------------------
@when("the customer checks out")
def customer_checks_out(customer_id, shipping_address, outcome):
    try:
        outcome["order_id"] = current_domain.process(
            Checkout(customer_id=customer_id, shipping_address=json.dumps(shipping_address)),
            asynchronous=False,
        )
    except Exception as exc:
        outcome["exc"] = exc


@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_lines(customer_id, count):
    assert len(find_cart(customer_id).items) == count


@then(parsers.cfparse('the cart line for "{product_id}" has quantity {qty:d}'))
def cart_line_quantity(customer_id, product_id, qty):
    cart = find_cart(customer_id)
    item = cart.find_item(product_id)
    assert item is not None
    assert item.quantity == qty


@then(parsers.cfparse("an order totalling {total:f} is placed"))
def order_placed(outcome, total):
    assert outcome["exc"] is None
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.total_amount == pytest.approx(total)


@then("the customer has no orders")
def no_orders(customer_id):
    assert orders_for(customer_id) == []
