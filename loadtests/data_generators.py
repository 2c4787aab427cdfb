"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's request schemas and
match their camelCase field names.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["Electronics", "Clothing", "Home", "Sports", "Books"]


def customer_id() -> str:
    """Generate customer ids like 'cust-lt-a1b2c3d4'."""
    return f"cust-lt-{uuid.uuid4().hex[:8]}"


def idempotency_key() -> str:
    return f"checkout-{uuid.uuid4().hex[:12]}"


def product_data() -> dict:
    """Generate AddProductRequest payload."""
    word = fake.word().capitalize()
    return {
        "name": f"{word} {fake.word().capitalize()}"[:255],
        "description": fake.sentence(nb_words=10),
        "price": round(random.uniform(1.0, 500.0), 2),
        "stock": random.randint(0, 200),
        "category": random.choice(CATEGORIES),
        "imageUrl": fake.image_url(),
    }


def address_data() -> dict:
    """Generate AddressSchema payload."""
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "postalCode": fake.zipcode()[:20],
        "country": "US",
    }


def checkout_data(key: str | None = None) -> dict:
    payload = {"shippingAddress": address_data()}
    if key:
        payload["idempotencyKey"] = key
    return payload


def cart_quantity() -> int:
    return random.randint(1, 4)
