from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable

import pytest

from storefront_lite.domain.product import Product


EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Build a Product with sensible defaults; keyword overrides win."""

    def factory(id: str = "1", **overrides: Any) -> Product:
        fields: dict[str, Any] = {
            "name": f"Product {id}",
            "price": Decimal("10.00"),
            "image": f"https://images.example.com/{id}.jpeg",
            "category": "Electronics",
            "description": f"Description of product {id}",
            "stock": 5,
            "created_at": EPOCH + timedelta(days=int(id) if id.isdigit() else 0),
            "rating": 4.0,
            "reviews": 10,
        }
        fields.update(overrides)
        return Product(id=id, **fields)

    return factory
