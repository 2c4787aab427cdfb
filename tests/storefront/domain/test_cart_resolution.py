"""Tests for resolving cart items against the catalogue."""

from storefront.cart.cart import ShoppingCart
from storefront.cart.resolution import resolve
from storefront.catalogue.fake_adapter import FakeCatalogue


def _catalogue():
    catalogue = FakeCatalogue()
    catalogue.add("p1", name="Widget", price=10.0)
    catalogue.add("p2", name="Gadget", price=5.0)
    return catalogue


def _cart(*entries):
    cart = ShoppingCart.create(customer_id="cust-001")
    for product_id, quantity in entries:
        cart.add_item(product_id, quantity)
    return cart


class TestResolve:
    def test_attaches_product_data_in_cart_order(self):
        lines = resolve(_cart(("p2", 1), ("p1", 2)).items, _catalogue())
        assert [line.product_id for line in lines] == ["p2", "p1"]
        assert lines[1].product.name == "Widget"
        assert lines[1].line_total == 20.0

    def test_line_totals(self):
        lines = resolve(_cart(("p1", 2), ("p2", 1)).items, _catalogue())
        assert [line.line_total for line in lines] == [20.0, 5.0]

    def test_looks_up_each_product_once(self):
        catalogue = _catalogue()
        resolve(_cart(("p2", 1), ("p1", 2)).items, catalogue)
        assert catalogue.lookups == ["p2", "p1"]

    def test_deleted_product_is_flagged_not_dropped(self):
        catalogue = _catalogue()
        cart = _cart(("p1", 2), ("p2", 1))
        catalogue.remove("p2")

        lines = resolve(cart.items, catalogue)
        assert len(lines) == 2
        assert lines[1].product is None
        assert lines[1].available is False
        assert lines[1].line_total == 0.0
        assert lines[0].line_total == 20.0

    def test_reflects_current_price(self):
        catalogue = _catalogue()
        cart = _cart(("p1", 1))
        catalogue.set_price("p1", 12.5)
        assert resolve(cart.items, catalogue)[0].line_total == 12.5

    def test_empty_cart(self):
        assert resolve([], _catalogue()) == []
