"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer), separate from internal
Protean commands. JSON keys are camelCase on the wire; snake_case is accepted
on input as well.
"""

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class AddressSchema(ApiModel):
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str | None = None
    postal_code: str = Field(min_length=1)
    country: str = Field(min_length=1)


class ProductResponse(ApiModel):
    id: str
    name: str
    description: str | None = None
    price: float
    stock: int = 0
    category: str | None = None
    image_url: str | None = None
    rating: float | None = None
    review_count: int | None = None


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(ApiModel):
    product_id: str = Field(min_length=1)
    quantity: int = Field(ge=1, default=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "productId": "3f2a6c1e-0b7d-4c1a-9a55-2f0e8d1c7b10",
                    "quantity": 2,
                }
            ]
        }
    }


class UpdateCartQuantityRequest(ApiModel):
    quantity: int  # zero or less removes the item


class CartLineResponse(ApiModel):
    product_id: str
    product: ProductResponse | None
    quantity: int
    available: bool
    line_total: float


# ---------------------------------------------------------------------------
# Checkout / Orders
# ---------------------------------------------------------------------------
class CheckoutRequest(ApiModel):
    shipping_address: AddressSchema
    idempotency_key: str | None = Field(default=None, max_length=255)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shippingAddress": {
                        "street": "123 Main St",
                        "city": "Anytown",
                        "postalCode": "12345",
                        "country": "US",
                    },
                    "idempotencyKey": "checkout-7f3e",
                }
            ]
        }
    }


class OrderLineResponse(ApiModel):
    product_id: str
    product_name: str
    quantity: int
    price_at_purchase: float
    line_total: float
    product: ProductResponse | None = None


class OrderResponse(ApiModel):
    id: str
    customer_id: str
    items: list[OrderLineResponse]
    total_amount: float
    formatted_total: str
    shipping_address: AddressSchema
    idempotency_key: str | None = None
    placed_at: datetime | None = None


class CheckoutResponse(ApiModel):
    message: str = "Order placed successfully"
    order: OrderResponse


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class AddProductRequest(ApiModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(ge=0)
    stock: int = Field(ge=0, default=0)
    category: str | None = None
    image_url: str | None = None
    rating: float = Field(ge=0, le=5, default=0.0)
    review_count: int = Field(ge=0, default=0)


class ChangePriceRequest(ApiModel):
    price: float = Field(ge=0)


class MessageResponse(ApiModel):
    message: str
