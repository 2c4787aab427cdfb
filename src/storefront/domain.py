"""Storefront bounded context: catalogue, shopping cart, checkout, and orders.

Customers build a cart against the product catalogue and convert it into an
immutable order at checkout.
"""

import structlog
from protean.domain import Domain

from storefront.utils.logging import configure_logging

configure_logging()

storefront = Domain(name="storefront")

logger = structlog.get_logger(__name__)
