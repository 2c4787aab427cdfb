"""Product aggregate: the catalogue record carts and orders are priced from."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from storefront.catalogue.events import ProductAdded, ProductPriceChanged, ProductStockAdjusted
from storefront.domain import storefront


@storefront.aggregate
class Product:
    """Product aggregate root."""

    name: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    stock: Integer(default=0, min_value=0)
    category: String(max_length=100)
    image_url: String(max_length=500)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    review_count: Integer(default=0, min_value=0)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def add(
        cls,
        name,
        price,
        stock=0,
        description=None,
        category=None,
        image_url=None,
        rating=0.0,
        review_count=0,
    ):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            stock=stock,
            category=category,
            image_url=image_url,
            rating=rating,
            review_count=review_count,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                price=price,
                stock=stock,
                category=category,
                added_at=now,
            )
        )
        return product

    def change_price(self, new_price):
        if new_price is None or new_price < 0:
            raise ValidationError({"price": ["Price must be zero or greater"]})

        previous_price = self.price
        self.price = new_price
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductPriceChanged(
                product_id=self.id,
                previous_price=previous_price,
                new_price=new_price,
            )
        )

    def adjust_stock(self, new_stock):
        if new_stock is None or new_stock < 0:
            raise ValidationError({"stock": ["Stock must be zero or greater"]})

        previous_stock = self.stock
        self.stock = new_stock
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductStockAdjusted(
                product_id=self.id,
                previous_stock=previous_stock,
                new_stock=new_stock,
            )
        )
