"""Sample catalogue used by `manage.py seed-catalogue`."""

from protean.utils.globals import current_domain

from storefront.catalogue.management import AddProduct
from storefront.catalogue.product import Product

_IMG = "https://images.unsplash.com/photo-{}?w=400&h=400&fit=crop"

SAMPLE_PRODUCTS = [
    {
        "name": "Wireless Bluetooth Headphones",
        "description": "High-quality wireless headphones with noise cancellation",
        "price": 199.99,
        "image_url": _IMG.format("1505740420928-5e560c06d30e"),
        "category": "Electronics",
        "stock": 50,
        "rating": 4.5,
        "review_count": 128,
    },
    {
        "name": "Smart Watch Series 5",
        "description": "Advanced fitness tracking and smart notifications",
        "price": 299.99,
        "image_url": _IMG.format("1523275335684-37898b6baf30"),
        "category": "Electronics",
        "stock": 30,
        "rating": 4.7,
        "review_count": 89,
    },
    {
        "name": "Organic Cotton T-Shirt",
        "description": "Comfortable and sustainable organic cotton tee",
        "price": 29.99,
        "image_url": _IMG.format("1521572163474-6864f9cf17ab"),
        "category": "Clothing",
        "stock": 100,
        "rating": 4.3,
        "review_count": 56,
    },
    {
        "name": "Gaming Laptop Pro 15",
        "description": "Powerful gaming laptop with RTX graphics and fast refresh display",
        "price": 1499.99,
        "image_url": _IMG.format("1517336714731-489689fd1ca8"),
        "category": "Electronics",
        "stock": 20,
        "rating": 4.8,
        "review_count": 210,
    },
    {
        "name": "Stainless Steel Water Bottle",
        "description": "Insulated bottle keeps drinks hot or cold for 24 hours",
        "price": 24.99,
        "image_url": _IMG.format("1560841615-4e4c90b7b62a"),
        "category": "Accessories",
        "stock": 200,
        "rating": 4.6,
        "review_count": 342,
    },
    {
        "name": "Running Shoes X200",
        "description": "Lightweight running shoes with superior cushioning",
        "price": 119.99,
        "image_url": _IMG.format("1542291026-7eec264c27ff"),
        "category": "Sports",
        "stock": 75,
        "rating": 4.4,
        "review_count": 178,
    },
    {
        "name": "Classic Leather Wallet",
        "description": "Minimalist and stylish genuine leather wallet",
        "price": 49.99,
        "image_url": _IMG.format("1523289333742-be1143f6b766"),
        "category": "Accessories",
        "stock": 90,
        "rating": 4.2,
        "review_count": 67,
    },
    {
        "name": "Noise Cancelling Earbuds",
        "description": "Compact earbuds with immersive sound and ANC technology",
        "price": 149.99,
        "image_url": _IMG.format("1606813902779-5d9f1a6e2dff"),
        "category": "Electronics",
        "stock": 120,
        "rating": 4.5,
        "review_count": 134,
    },
    {
        "name": "Smartphone Tripod Stand",
        "description": "Adjustable tripod stand compatible with all smartphones",
        "price": 39.99,
        "image_url": _IMG.format("1580894742904-6c36f5f8d6d3"),
        "category": "Electronics",
        "stock": 60,
        "rating": 4.3,
        "review_count": 54,
    },
    {
        "name": "Modern Desk Lamp",
        "description": "LED desk lamp with adjustable brightness and touch control",
        "price": 59.99,
        "image_url": _IMG.format("1505691938895-1758d7feb511"),
        "category": "Home",
        "stock": 85,
        "rating": 4.4,
        "review_count": 92,
    },
    {
        "name": "Cotton Hoodie",
        "description": "Soft and warm cotton hoodie for everyday wear",
        "price": 49.99,
        "image_url": _IMG.format("1612423284934-46aa6c039f87"),
        "category": "Clothing",
        "stock": 150,
        "rating": 4.6,
        "review_count": 101,
    },
    {
        "name": "Fiction Bestseller Book",
        "description": "Gripping novel from an award-winning author",
        "price": 19.99,
        "image_url": _IMG.format("1524995997946-a1c2e315a42f"),
        "category": "Books",
        "stock": 300,
        "rating": 4.8,
        "review_count": 420,
    },
    {
        "name": "Portable Bluetooth Speaker",
        "description": "Loud and clear sound with deep bass, water-resistant",
        "price": 89.99,
        "image_url": _IMG.format("1519677100203-a0e668c92439"),
        "category": "Electronics",
        "stock": 110,
        "rating": 4.5,
        "review_count": 198,
    },
    {
        "name": "Yoga Mat Pro",
        "description": "Non-slip yoga mat with extra cushioning and durability",
        "price": 39.99,
        "image_url": _IMG.format("1603286463744-fd3f2f7f69f2"),
        "category": "Sports",
        "stock": 140,
        "rating": 4.7,
        "review_count": 233,
    },
    {
        "name": "Digital DSLR Camera",
        "description": "Professional DSLR camera with 24MP lens and 4K video support",
        "price": 899.99,
        "image_url": _IMG.format("1519183071298-a2962be90b8e"),
        "category": "Electronics",
        "stock": 25,
        "rating": 4.9,
        "review_count": 65,
    },
]


def seed_catalogue(clear=True):
    """Load SAMPLE_PRODUCTS into the active domain and return the new product ids.

    With `clear`, existing products are deleted first.
    """
    if clear:
        repo = current_domain.repository_for(Product)
        for product in repo._dao.query.all().items:
            repo._dao.delete(product)

    return [current_domain.process(AddProduct(**data), asynchronous=False) for data in SAMPLE_PRODUCTS]
