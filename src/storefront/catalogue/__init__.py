"""Product lookup used by the cart and checkout.

Reads go to the Product repository of the active domain unless a test has
installed another catalogue with set_catalogue().
"""

from storefront.catalogue.port import ProductCatalogue
from storefront.catalogue.repository_adapter import RepositoryCatalogue

_override: ProductCatalogue | None = None


def get_catalogue() -> ProductCatalogue:
    if _override is not None:
        return _override
    return RepositoryCatalogue()


def set_catalogue(catalogue: ProductCatalogue) -> None:
    global _override
    _override = catalogue


def reset_catalogue() -> None:
    global _override
    _override = None
