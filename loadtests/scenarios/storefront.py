"""Storefront load test scenarios.

Two stateful SequentialTaskSet journeys for independent shoppers (a browsing
cart that is edited then emptied, and a cart carried through checkout with a
retried request) plus a contention user whose instances all share a single
customer's cart.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, constant_pacing, task

from loadtests.data_generators import (
    cart_quantity,
    checkout_data,
    customer_id,
    idempotency_key,
    product_data,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


def _ensure_products(client, minimum=3) -> list[str]:
    """Return catalogue product ids, creating products when the catalogue is sparse."""
    resp = client.get("/products", name="GET /products")
    product_ids = [p["id"] for p in resp.json()] if resp.status_code == 200 else []
    while len(product_ids) < minimum:
        created = client.post("/products", json=product_data(), name="POST /products")
        if created.status_code != 201:
            break
        product_ids.append(created.json()["id"])
    return product_ids


class _ShopperJourney(SequentialTaskSet):
    def on_start(self):
        self.state = ShopperState(customer_id=customer_id())
        self.state.product_ids = _ensure_products(self.client)
        if not self.state.product_ids:
            self.interrupt()

    def _add(self, product_id, quantity):
        with self.client.post(
            "/cart",
            json={"productId": product_id, "quantity": quantity},
            headers=self.state.headers,
            catch_response=True,
            name="POST /cart",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart_lines[product_id] = self.state.cart_lines.get(product_id, 0) + quantity
            else:
                resp.failure(f"Add to cart failed: {resp.status_code}: {extract_error_detail(resp)}")


class CartEditingJourney(_ShopperJourney):
    """Add Items -> Update Quantity -> Remove Item -> Remove Unknown -> View.

    Models a browsing customer who fills a cart, changes their mind, and
    leaves without buying.
    """

    @task
    def add_items(self):
        for product_id in random.sample(self.state.product_ids, k=min(3, len(self.state.product_ids))):
            self._add(product_id, cart_quantity())

    @task
    def update_quantity(self):
        if not self.state.cart_lines:
            return
        product_id = next(iter(self.state.cart_lines))
        quantity = cart_quantity()
        with self.client.put(
            f"/cart/{product_id}",
            json={"quantity": quantity},
            headers=self.state.headers,
            catch_response=True,
            name="PUT /cart/{productId}",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart_lines[product_id] = quantity
            else:
                resp.failure(f"Update quantity failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def remove_item(self):
        if not self.state.cart_lines:
            return
        product_id = next(iter(self.state.cart_lines))
        with self.client.delete(
            f"/cart/{product_id}",
            headers=self.state.headers,
            catch_response=True,
            name="DELETE /cart/{productId}",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart_lines.pop(product_id, None)
            else:
                resp.failure(f"Remove item failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def remove_unknown_item(self):
        with self.client.delete(
            "/cart/not-in-cart",
            headers=self.state.headers,
            catch_response=True,
            name="DELETE /cart/{productId} (absent)",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Removing an absent item should be a no-op: {resp.status_code}")

    @task
    def view_cart(self):
        with self.client.get("/cart", headers=self.state.headers, catch_response=True, name="GET /cart") as resp:
            if resp.status_code != 200:
                resp.failure(f"View cart failed: {resp.status_code}: {extract_error_detail(resp)}")
                return
            seen = {line["productId"]: line["quantity"] for line in resp.json()}
            if seen != self.state.cart_lines:
                resp.failure(f"Cart drifted: expected {self.state.cart_lines}, got {seen}")

    @task
    def done(self):
        self.interrupt()


class CheckoutJourney(_ShopperJourney):
    """Add Items -> Checkout -> Retry Checkout -> Checkout Empty Cart -> List Orders.

    The retry carries the same idempotency key and must return the same order.
    """

    @task
    def add_items(self):
        for product_id in random.sample(self.state.product_ids, k=min(2, len(self.state.product_ids))):
            self._add(product_id, cart_quantity())

    @task
    def checkout(self):
        self.key = idempotency_key()
        self.payload = checkout_data(self.key)
        with self.client.post(
            "/cart/checkout",
            json=self.payload,
            headers=self.state.headers,
            catch_response=True,
            name="POST /cart/checkout",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["order"]["id"])
                self.state.cart_lines.clear()
            else:
                resp.failure(f"Checkout failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def retry_checkout(self):
        with self.client.post(
            "/cart/checkout",
            json=self.payload,
            headers=self.state.headers,
            catch_response=True,
            name="POST /cart/checkout (retry)",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Retried checkout failed: {resp.status_code}: {extract_error_detail(resp)}")
            elif resp.json()["order"]["id"] != self.state.order_ids[-1]:
                resp.failure("Retried checkout placed a second order")

    @task
    def checkout_empty_cart(self):
        with self.client.post(
            "/cart/checkout",
            json=checkout_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /cart/checkout (empty)",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Empty cart checkout should be refused, got {resp.status_code}")

    @task
    def list_orders(self):
        with self.client.get("/orders", headers=self.state.headers, catch_response=True, name="GET /orders") as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code}: {extract_error_detail(resp)}")
            elif len(resp.json()) != len(self.state.order_ids):
                resp.failure(f"Expected {len(self.state.order_ids)} orders, got {len(resp.json())}")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Locust user simulating independent shoppers.

    Weighted distribution:
    - 60% Cart editing (browsing, abandonment)
    - 40% Cart to checkout conversion
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        CartEditingJourney: 3,
        CheckoutJourney: 2,
    }


class SharedCartUser(HttpUser):
    """Contention test: every instance adds to the same customer's cart.

    Cart mutations are read-modify-write without conflict detection, so two
    overlapping adds can both read quantity N and both write N+1. The
    `check_for_lost_updates` task reports a failure whenever the stored
    quantity falls behind the number of acknowledged adds.
    """

    wait_time = constant_pacing(0.05)

    customer_id = "cust-lt-shared"
    product_id: str | None = None
    acknowledged_adds = 0

    def on_start(self):
        if SharedCartUser.product_id is None:
            SharedCartUser.product_id = _ensure_products(self.client, minimum=1)[0]

    @property
    def headers(self):
        return {"X-User-Id": self.customer_id}

    @task(10)
    def add_one(self):
        resp = self.client.post(
            "/cart",
            json={"productId": self.product_id, "quantity": 1},
            headers=self.headers,
            name="[CONTENTION] POST /cart",
        )
        if resp.status_code == 200:
            SharedCartUser.acknowledged_adds += 1

    @task(1)
    def check_for_lost_updates(self):
        with self.client.get(
            "/cart",
            headers=self.headers,
            catch_response=True,
            name="[CONTENTION] GET /cart",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"View cart failed: {resp.status_code}: {extract_error_detail(resp)}")
                return
            stored = sum(line["quantity"] for line in resp.json() if line["productId"] == self.product_id)
            if stored < SharedCartUser.acknowledged_adds:
                resp.failure(f"Lost updates: {SharedCartUser.acknowledged_adds} adds acknowledged, {stored} stored")
