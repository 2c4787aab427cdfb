"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; no cross-user sharing.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks one simulated customer's cart and orders."""

    customer_id: str | None = None
    product_ids: list[str] = field(default_factory=list)
    cart_lines: dict[str, int] = field(default_factory=dict)
    order_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"X-User-Id": self.customer_id}
