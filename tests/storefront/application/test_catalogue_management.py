import pytest
from protean import current_domain
from storefront.catalogue import get_catalogue
from storefront.catalogue.listing import list_products
from storefront.catalogue.management import (
    AddProduct,
    AdjustProductStock,
    ChangeProductPrice,
    RemoveProduct,
)
from storefront.catalogue.product import Product
from storefront.catalogue.seed import SAMPLE_PRODUCTS, seed_catalogue
from storefront.errors import ProductNotFoundError


def _add_product(**overrides):
    fields = {"name": "Desk Lamp", "price": 45.5, "stock": 12, "category": "Home"}
    fields.update(overrides)
    return current_domain.process(AddProduct(**fields), asynchronous=False)


class TestAddProduct:
    def test_persists_product(self):
        product_id = _add_product()
        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Desk Lamp"
        assert product.price == 45.5
        assert product.stock == 12

    def test_visible_through_catalogue(self):
        product_id = _add_product()
        snapshot = get_catalogue().find(product_id)
        assert snapshot is not None
        assert snapshot.name == "Desk Lamp"
        assert snapshot.price == 45.5


class TestChangePrice:
    def test_updates_price(self):
        product_id = _add_product()
        current_domain.process(ChangeProductPrice(product_id=product_id, price=39.0), asynchronous=False)
        assert current_domain.repository_for(Product).get(product_id).price == 39.0

    def test_unknown_product(self):
        with pytest.raises(ProductNotFoundError):
            current_domain.process(ChangeProductPrice(product_id="missing", price=1.0), asynchronous=False)


class TestAdjustStock:
    def test_updates_stock(self):
        product_id = _add_product()
        current_domain.process(AdjustProductStock(product_id=product_id, stock=3), asynchronous=False)
        assert current_domain.repository_for(Product).get(product_id).stock == 3


class TestRemoveProduct:
    def test_catalogue_no_longer_finds_it(self):
        product_id = _add_product()
        current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
        assert get_catalogue().find(product_id) is None

    def test_unknown_product(self):
        with pytest.raises(ProductNotFoundError):
            current_domain.process(RemoveProduct(product_id="missing"), asynchronous=False)


class TestListing:
    @pytest.fixture(autouse=True)
    def products(self):
        _add_product(name="Yoga Mat", category="Sports")
        _add_product(name="Running Shoes", category="Sports")
        _add_product(name="Coffee Maker", category="Home")

    def test_ordered_by_name(self):
        assert [p.name for p in list_products()] == ["Coffee Maker", "Running Shoes", "Yoga Mat"]

    def test_category_filter(self):
        assert [p.name for p in list_products(category="Sports")] == ["Running Shoes", "Yoga Mat"]

    def test_search_is_case_insensitive(self):
        assert [p.name for p in list_products(search="yOGA")] == ["Yoga Mat"]

    def test_filters_combine(self):
        assert list_products(category="Home", search="shoes") == []


class TestSeed:
    def test_loads_sample_products(self):
        seed_catalogue()
        assert len(list_products()) == len(SAMPLE_PRODUCTS)

    def test_clear_replaces_existing(self):
        _add_product(name="Leftover")
        seed_catalogue(clear=True)
        assert "Leftover" not in [p.name for p in list_products()]
