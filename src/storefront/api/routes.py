"""FastAPI routes for the Storefront: cart, checkout, orders, and products."""

import json

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.api.auth import current_customer_id
from storefront.api.schemas import (
    AddProductRequest,
    AddressSchema,
    AddToCartRequest,
    CartLineResponse,
    ChangePriceRequest,
    CheckoutRequest,
    CheckoutResponse,
    MessageResponse,
    OrderLineResponse,
    OrderResponse,
    ProductResponse,
    UpdateCartQuantityRequest,
)
from storefront.cart.items import AddToCart, RemoveFromCart, SetCartQuantity
from storefront.cart.resolution import cart_contents
from storefront.catalogue import get_catalogue
from storefront.catalogue.listing import list_products
from storefront.catalogue.management import AddProduct, ChangeProductPrice, RemoveProduct
from storefront.catalogue.product import Product
from storefront.checkout.checkout import Checkout
from storefront.errors import ProductNotFoundError
from storefront.order.history import get_order, orders_for


# ---------------------------------------------------------------------------
# Response builders
# ---------------------------------------------------------------------------
def _snapshot_response(snapshot) -> ProductResponse | None:
    if snapshot is None:
        return None
    return ProductResponse(**snapshot.to_dict())


def _product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        stock=product.stock or 0,
        category=product.category,
        image_url=product.image_url,
        rating=product.rating,
        review_count=product.review_count,
    )


def _cart_response(customer_id: str) -> list[CartLineResponse]:
    return [
        CartLineResponse(
            product_id=line.product_id,
            product=_snapshot_response(line.product),
            quantity=line.quantity,
            available=line.available,
            line_total=line.line_total,
        )
        for line in cart_contents(customer_id)
    ]


def _order_response(order) -> OrderResponse:
    products = get_catalogue().find_many([str(line.product_id) for line in order.items])
    return OrderResponse(
        id=str(order.id),
        customer_id=str(order.customer_id),
        items=[
            OrderLineResponse(
                product_id=str(line.product_id),
                product_name=line.product_name,
                quantity=line.quantity,
                price_at_purchase=line.price_at_purchase,
                line_total=line.line_total,
                product=_snapshot_response(products.get(str(line.product_id))),
            )
            for line in order.items
        ],
        total_amount=order.total_amount,
        formatted_total=f"{order.total_amount:.2f}",
        shipping_address=AddressSchema(**order.shipping_address.to_dict()),
        idempotency_key=order.idempotency_key,
        placed_at=order.placed_at,
    )


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=list[CartLineResponse])
async def get_cart(customer_id: str = Depends(current_customer_id)) -> list[CartLineResponse]:
    return _cart_response(customer_id)


@cart_router.post("", response_model=list[CartLineResponse])
async def add_to_cart(body: AddToCartRequest, customer_id: str = Depends(current_customer_id)):
    command = AddToCart(
        customer_id=customer_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(customer_id)


@cart_router.post("/checkout", status_code=201, response_model=CheckoutResponse)
async def checkout(body: CheckoutRequest, customer_id: str = Depends(current_customer_id)) -> CheckoutResponse:
    """Convert the customer's cart into an order.

    1. Price every cart line from the current catalogue
    2. Create the order and clear the cart in one unit of work
    3. Return the order with its lines resolved to product data
    """
    command = Checkout(
        customer_id=customer_id,
        shipping_address=json.dumps(body.shipping_address.model_dump()),
        idempotency_key=body.idempotency_key,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return CheckoutResponse(order=_order_response(get_order(customer_id, order_id)))


@cart_router.put("/{product_id}", response_model=list[CartLineResponse])
async def update_cart_quantity(
    product_id: str,
    body: UpdateCartQuantityRequest,
    customer_id: str = Depends(current_customer_id),
):
    command = SetCartQuantity(
        customer_id=customer_id,
        product_id=product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(customer_id)


@cart_router.delete("/{product_id}", response_model=list[CartLineResponse])
async def remove_from_cart(product_id: str, customer_id: str = Depends(current_customer_id)):
    command = RemoveFromCart(customer_id=customer_id, product_id=product_id)
    current_domain.process(command, asynchronous=False)
    return _cart_response(customer_id)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(customer_id: str = Depends(current_customer_id)) -> list[OrderResponse]:
    return [_order_response(order) for order in orders_for(customer_id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order_detail(order_id: str, customer_id: str = Depends(current_customer_id)) -> OrderResponse:
    return _order_response(get_order(customer_id, order_id))


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


def _load_product(product_id: str) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise ProductNotFoundError(product_id) from None


@product_router.get("", response_model=list[ProductResponse])
async def get_products(category: str | None = None, search: str | None = None) -> list[ProductResponse]:
    return [_product_response(p) for p in list_products(category=category, search=search)]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(_load_product(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def add_product(body: AddProductRequest) -> ProductResponse:
    command = AddProduct(**body.model_dump())
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(_load_product(product_id))


@product_router.put("/{product_id}/price", response_model=ProductResponse)
async def change_product_price(product_id: str, body: ChangePriceRequest) -> ProductResponse:
    command = ChangeProductPrice(product_id=product_id, price=body.price)
    current_domain.process(command, asynchronous=False)
    return _product_response(_load_product(product_id))


@product_router.delete("/{product_id}", response_model=MessageResponse)
async def remove_product(product_id: str) -> MessageResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product removed")
