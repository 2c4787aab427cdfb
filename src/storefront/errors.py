"""Storefront domain errors.

Each error subclasses the Protean exception the framework itself raises for the
same situation, so API error handlers treat framework and domain errors alike.
"""

from protean.exceptions import InvalidOperationError, ObjectNotFoundError


class _MessageMixin:
    message = ""

    def __str__(self):
        return self.message


class ProductNotFoundError(_MessageMixin, ObjectNotFoundError):
    def __init__(self, product_ids):
        if isinstance(product_ids, str):
            product_ids = [product_ids]
        self.product_ids = [str(pid) for pid in product_ids]
        if len(self.product_ids) == 1:
            self.message = "Product not found"
        else:
            self.message = "Products not found"
        super().__init__(self.message)


class CartItemNotFoundError(_MessageMixin, ObjectNotFoundError):
    def __init__(self, product_id):
        self.product_id = str(product_id)
        self.message = "Item not found in cart"
        super().__init__(self.message)


class OrderNotFoundError(_MessageMixin, ObjectNotFoundError):
    def __init__(self, order_id):
        self.order_id = str(order_id)
        self.message = "Order not found"
        super().__init__(self.message)


class EmptyCartError(_MessageMixin, InvalidOperationError):
    def __init__(self, customer_id):
        self.customer_id = str(customer_id)
        self.message = "Cart is empty"
        super().__init__(self.message)
