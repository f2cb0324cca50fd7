from __future__ import annotations

from decimal import Decimal

from storefront_lite.adapters.in_memory_cart_storage import InMemoryCartStorage
from storefront_lite.domain.cart import CartLedger, CartProduct
from storefront_lite.entrypoints.http.mappers.cart_mapper import CartMapper
from storefront_lite.use_cases.summarize_cart import SummarizeCart


def test_to_response_renders_ledger_and_summary() -> None:
    ledger = CartLedger(InMemoryCartStorage(), slot="cart-storage:abc")
    ledger.add_item(
        CartProduct(id="6", name="Yoga Mat", price=Decimal("29.99"), image="https://img/6.jpeg")
    )
    ledger.update_quantity("6", 2)

    payload = CartMapper.to_response(
        "abc", ledger, SummarizeCart().execute(ledger)
    ).model_dump(by_alias=True)

    assert payload["cartId"] == "abc"
    assert payload["itemCount"] == 2
    assert payload["total"] == "59.98"
    assert payload["items"] == [
        {
            "id": "6",
            "name": "Yoga Mat",
            "price": "29.99",
            "image": "https://img/6.jpeg",
            "quantity": 2,
            "variant": None,
            "lineTotal": "59.98",
        }
    ]
    assert payload["summary"] == {
        "subtotal": "59.98",
        "shipping": "0.00",
        "tax": "4.80",
        "total": "64.78",
        "freeShippingRemaining": "0.00",
    }
