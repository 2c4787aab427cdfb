"""Tests for the Product aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.catalogue.events import ProductAdded, ProductPriceChanged, ProductStockAdjusted
from storefront.catalogue.product import Product


def _product(**overrides):
    defaults = {"name": "Yoga Mat Pro", "price": 39.99, "stock": 140, "category": "Sports"}
    defaults.update(overrides)
    return Product.add(**defaults)


class TestAddProduct:
    def test_add(self):
        product = _product()
        assert product.name == "Yoga Mat Pro"
        assert product.stock == 140

    def test_raises_product_added(self):
        product = _product()
        event = product._events[0]
        assert isinstance(event, ProductAdded)
        assert event.price == 39.99

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _product(price=-1.0)

    def test_free_product_allowed(self):
        assert _product(price=0.0).price == 0.0


class TestChangePrice:
    def test_change_price(self):
        product = _product()
        product._events.clear()
        product.change_price(34.99)
        assert product.price == 34.99
        event = product._events[0]
        assert isinstance(event, ProductPriceChanged)
        assert event.previous_price == 39.99
        assert event.new_price == 34.99

    def test_negative_price_rejected(self):
        product = _product()
        with pytest.raises(ValidationError):
            product.change_price(-5)
        assert product.price == 39.99


class TestAdjustStock:
    def test_adjust_stock(self):
        product = _product()
        product._events.clear()
        product.adjust_stock(10)
        assert product.stock == 10
        assert isinstance(product._events[0], ProductStockAdjusted)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            _product().adjust_stock(-1)
