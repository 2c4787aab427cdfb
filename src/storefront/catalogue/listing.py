"""Product listing: read queries over the catalogue."""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product


def list_products(category=None, search=None):
    """Return products ordered by name, optionally narrowed by category and name search."""
    query = current_domain.repository_for(Product)._dao.query
    if category:
        query = query.filter(category=category)
    products = query.order_by("name").all().items

    if search:
        needle = search.lower()
        products = [p for p in products if needle in p.name.lower()]
    return products
