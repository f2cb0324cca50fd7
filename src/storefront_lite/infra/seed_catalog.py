"""Demo catalog loaded into the in-memory store at startup.

Also used by scripts/seed_products.py to fill a database.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from storefront_lite.domain.product import Product


# Catalog order is listing order; created_at grows with it so "newest" is
# the reverse of the featured order.
_CATALOG_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)

_SEED_PRODUCTS = [
    {
        "name": "Wireless Bluetooth Headphones",
        "price": "199.99",
        "original_price": "299.99",
        "image": "https://images.pexels.com/photos/3394650/pexels-photo-3394650.jpeg",
        "rating": 4.8,
        "reviews": 124,
        "category": "Electronics",
        "description": "Premium wireless headphones with active noise cancellation and 30-hour battery life.",
        "stock": 50,
        "specifications": {
            "brand": "AudioTech",
            "model": "AT-WH1000",
            "color": "Black",
            "weight": "250g",
        },
    },
    {
        "name": "Smart Fitness Watch",
        "price": "249.99",
        "original_price": "349.99",
        "image": "https://images.pexels.com/photos/437037/pexels-photo-437037.jpeg",
        "rating": 4.7,
        "reviews": 89,
        "category": "Electronics",
        "description": "Advanced fitness tracking with heart rate monitor, GPS, and 7-day battery life.",
        "stock": 30,
        "specifications": {
            "brand": "FitTech",
            "model": "FT-SW200",
            "color": "Space Gray",
            "display": '1.4" AMOLED',
        },
    },
    {
        "name": "Premium Coffee Maker",
        "price": "89.99",
        "original_price": "129.99",
        "image": "https://images.pexels.com/photos/324028/pexels-photo-324028.jpeg",
        "rating": 4.6,
        "reviews": 67,
        "category": "Home & Garden",
        "description": "Automatic drip coffee maker with timer.",
        "stock": 25,
    },
    {
        "name": "Designer Backpack",
        "price": "79.99",
        "original_price": "119.99",
        "image": "https://images.pexels.com/photos/2905238/pexels-photo-2905238.jpeg",
        "rating": 4.9,
        "reviews": 156,
        "category": "Fashion",
        "description": "Stylish and durable backpack for everyday use.",
        "stock": 40,
    },
    {
        "name": "Wireless Gaming Mouse",
        "price": "59.99",
        "original_price": "89.99",
        "image": "https://images.pexels.com/photos/2115256/pexels-photo-2115256.jpeg",
        "rating": 4.5,
        "reviews": 78,
        "category": "Electronics",
        "description": "High-precision gaming mouse with RGB lighting.",
        "stock": 60,
    },
    {
        "name": "Yoga Mat Set",
        "price": "29.99",
        "original_price": "49.99",
        "image": "https://images.pexels.com/photos/4056723/pexels-photo-4056723.jpeg",
        "rating": 4.4,
        "reviews": 92,
        "category": "Sports",
        "description": "Non-slip yoga mat with carrying strap.",
        "stock": 0,
    },
]


def default_catalog() -> list[Product]:
    """Fresh Product instances for the demo catalog, ids "1".."N"."""
    return [
        Product(
            id=str(index),
            name=data["name"],
            price=Decimal(data["price"]),
            original_price=Decimal(data["original_price"]),
            image=data["image"],
            rating=data["rating"],
            reviews=data["reviews"],
            category=data["category"],
            description=data["description"],
            stock=data["stock"],
            specifications=dict(data.get("specifications", {})),
            created_at=_CATALOG_EPOCH + timedelta(days=index),
        )
        for index, data in enumerate(_SEED_PRODUCTS, start=1)
    ]
