import pytest
from storefront.catalogue import reset_catalogue, set_catalogue
from storefront.catalogue.fake_adapter import FakeCatalogue


@pytest.fixture()
def fake_catalogue():
    """Swap the catalogue port for an in-memory table for the duration of a test."""
    catalogue = FakeCatalogue()
    set_catalogue(catalogue)
    yield catalogue
    reset_catalogue()


@pytest.fixture()
def shipping_address():
    return {
        "street": "123 Main St",
        "city": "Anytown",
        "state": "CA",
        "postal_code": "12345",
        "country": "US",
    }
