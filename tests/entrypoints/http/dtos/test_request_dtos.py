"""
Validation contract of the request DTOs.

Every violated rule must be reported, so clients can show all field errors
at once.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront_lite.entrypoints.http.dtos.accounts import LoginRequestDTO, RegisterRequestDTO
from storefront_lite.entrypoints.http.dtos.cart import AddCartItemRequestDTO
from storefront_lite.entrypoints.http.dtos.products import (
    CreateProductRequestDTO,
    UpdateProductRequestDTO,
)


def _failed_fields(exc: ValidationError) -> set[str]:
    return {".".join(str(part) for part in error["loc"]) for error in exc.errors()}


VALID_PRODUCT = {
    "name": "Wireless Gaming Mouse",
    "price": "59.99",
    "originalPrice": "89.99",
    "image": "https://images.example.com/mouse.jpeg",
    "category": "Electronics",
    "description": "High-precision gaming mouse with RGB lighting.",
    "stock": 60,
    "specifications": {"dpi": "16000"},
}


# ==============================================================================
# Register / login
# ==============================================================================


def test_register_accepts_valid_payload() -> None:
    dto = RegisterRequestDTO(name="Jane Doe", email="jane@example.com", password="Secret123")

    assert dto.email == "jane@example.com"


def test_register_reports_every_failed_field() -> None:
    with pytest.raises(ValidationError) as exc_info:
        RegisterRequestDTO(name="J", email="not-an-email", password="short")

    assert _failed_fields(exc_info.value) == {"name", "email", "password"}


@pytest.mark.parametrize("password", ["alllowercase1", "ALLUPPERCASE1", "NoDigitsHere"])
def test_register_password_needs_upper_lower_and_digit(password: str) -> None:
    with pytest.raises(ValidationError, match="at least one uppercase letter"):
        RegisterRequestDTO(name="Jane", email="jane@example.com", password=password)


def test_register_name_max_length() -> None:
    with pytest.raises(ValidationError):
        RegisterRequestDTO(name="x" * 51, email="jane@example.com", password="Secret123")


def test_login_requires_non_empty_password() -> None:
    LoginRequestDTO(email="jane@example.com", password="x")

    with pytest.raises(ValidationError) as exc_info:
        LoginRequestDTO(email="jane@example.com", password="")

    assert _failed_fields(exc_info.value) == {"password"}


# ==============================================================================
# Products
# ==============================================================================


def test_create_product_accepts_camel_case_payload() -> None:
    dto = CreateProductRequestDTO.model_validate(VALID_PRODUCT)

    assert dto.price == Decimal("59.99")
    assert dto.original_price == Decimal("89.99")
    assert dto.specifications == {"dpi": "16000"}


def test_create_product_reports_every_failed_field() -> None:
    payload = {
        "name": "X",
        "price": "-5",
        "originalPrice": "0",
        "image": "not a url",
        "category": "",
        "description": "short",
        "stock": -1,
    }

    with pytest.raises(ValidationError) as exc_info:
        CreateProductRequestDTO.model_validate(payload)

    assert _failed_fields(exc_info.value) == {
        "name",
        "price",
        "originalPrice",
        "image",
        "category",
        "description",
        "stock",
    }


def test_create_product_requires_fields() -> None:
    with pytest.raises(ValidationError) as exc_info:
        CreateProductRequestDTO.model_validate({})

    assert _failed_fields(exc_info.value) == {
        "name",
        "price",
        "image",
        "category",
        "description",
        "stock",
    }


def test_create_product_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        CreateProductRequestDTO.model_validate({**VALID_PRODUCT, "rating": 5})


def test_create_product_rejects_fractional_stock() -> None:
    with pytest.raises(ValidationError):
        CreateProductRequestDTO.model_validate({**VALID_PRODUCT, "stock": 1.5})


def test_update_product_all_fields_optional() -> None:
    dto = UpdateProductRequestDTO.model_validate({})

    assert dto.model_dump(exclude_none=True) == {}


def test_update_product_applies_create_constraints() -> None:
    with pytest.raises(ValidationError) as exc_info:
        UpdateProductRequestDTO.model_validate({"price": "0", "description": "tiny"})

    assert _failed_fields(exc_info.value) == {"price", "description"}


def test_update_product_ignores_read_only_fields() -> None:
    dto = UpdateProductRequestDTO.model_validate(
        {
            "id": "other",
            "inStock": True,
            "createdAt": "2024-01-01T00:00:00Z",
            "price": "10.00",
        }
    )

    assert dto.model_dump(exclude_none=True) == {"price": Decimal("10.00")}


def test_product_prices_accept_sub_cent_precision() -> None:
    dto = CreateProductRequestDTO.model_validate({**VALID_PRODUCT, "price": "19.999"})

    assert dto.price == Decimal("19.999")


def test_product_price_upper_bound() -> None:
    with pytest.raises(ValidationError) as exc_info:
        UpdateProductRequestDTO.model_validate({"price": "10000000000"})

    assert _failed_fields(exc_info.value) == {"price"}


# ==============================================================================
# Cart
# ==============================================================================


def test_add_cart_item_accepts_camel_or_snake_case() -> None:
    assert AddCartItemRequestDTO.model_validate({"productId": "1"}).product_id == "1"
    assert AddCartItemRequestDTO.model_validate({"product_id": "1"}).product_id == "1"


def test_add_cart_item_requires_product_id() -> None:
    with pytest.raises(ValidationError):
        AddCartItemRequestDTO.model_validate({"productId": ""})
