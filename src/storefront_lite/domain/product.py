from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from storefront_lite.domain.errors import ValidationError


DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 12


class QueryValidationError(ValidationError):
    """Raised when catalog query parameters are invalid."""

    pass


class SortKey(str, Enum):
    FEATURED = "featured"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING = "rating"
    NEWEST = "newest"

    @classmethod
    def parse(cls, value: str | None) -> SortKey:
        """Unknown or missing keys fall back to FEATURED (input order)."""
        if not value:
            return cls.FEATURED
        value = _SORT_KEY_ALIASES.get(value, value)
        try:
            return cls(value)
        except ValueError:
            return cls.FEATURED


# Storefront UI spelling of the price sorts
_SORT_KEY_ALIASES = {
    "price-low": "price-asc",
    "price-high": "price-desc",
}


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Decimal
    image: str
    category: str
    description: str
    stock: int
    created_at: datetime
    original_price: Decimal | None = None
    rating: float = 0.0
    reviews: int = 0
    specifications: dict[str, str] = field(default_factory=dict)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0


@dataclass(frozen=True, slots=True)
class ProductDraft:
    """Admin-supplied fields for a new product; everything else is defaulted."""

    name: str
    price: Decimal
    image: str
    category: str
    description: str
    stock: int
    original_price: Decimal | None = None
    specifications: dict[str, str] | None = None

    def validate(self) -> None:
        """
        Raises:
            ValidationError: Listing every invalid field
        """
        errors = _field_errors(
            name=self.name,
            price=self.price,
            original_price=self.original_price,
            description=self.description,
            stock=self.stock,
        )
        if not self.category.strip():
            errors.append(_error("category", "Must not be empty", "REQUIRED"))
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class ProductChanges:
    """
    Partial update. None means "not supplied"; the identity is never part of it.

    original_price is the only optional attribute, so removing it is spelled
    out with clear_original_price.
    """

    name: str | None = None
    price: Decimal | None = None
    original_price: Decimal | None = None
    image: str | None = None
    category: str | None = None
    description: str | None = None
    stock: int | None = None
    rating: float | None = None
    reviews: int | None = None
    specifications: dict[str, str] | None = None
    clear_original_price: bool = False

    def validate(self) -> None:
        """
        Validate only the supplied fields.

        Raises:
            ValidationError: Listing every invalid field
        """
        errors = _field_errors(
            name=self.name,
            price=self.price,
            original_price=self.original_price,
            description=self.description,
            stock=self.stock,
        )
        if self.category is not None and not self.category.strip():
            errors.append(_error("category", "Must not be empty", "REQUIRED"))
        if self.rating is not None and not 0 <= self.rating <= 5:
            errors.append(_error("rating", "Must be between 0 and 5", "OUT_OF_RANGE"))
        if self.reviews is not None and self.reviews < 0:
            errors.append(_error("reviews", "Must be >= 0", "OUT_OF_RANGE"))
        if errors:
            raise ValidationError(errors=errors)

    def apply_to(self, product: Product) -> Product:
        supplied = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "clear_original_price" and getattr(self, f.name) is not None
        }
        if self.clear_original_price and self.original_price is None:
            supplied["original_price"] = None
        return replace(product, **supplied)


@dataclass(frozen=True, slots=True)
class ProductQuery:
    category: str | None = None
    search: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    min_rating: float | None = None
    sort_by: SortKey = SortKey.FEATURED
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE

    def validate(self) -> None:
        """
        Validate query parameters.

        Lenient parsing happens at the HTTP boundary; anything reaching this
        point is expected to be well-typed and in range.

        Raises:
            QueryValidationError: If query parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.min_price is not None and not isinstance(self.min_price, Decimal):
            raise QueryValidationError("min_price must be Decimal or None")
        if self.max_price is not None and not isinstance(self.max_price, Decimal):
            raise QueryValidationError("max_price must be Decimal or None")

        if self.page < 1:
            raise QueryValidationError("page must be >= 1")
        if self.limit <= 0:
            raise QueryValidationError("limit must be > 0")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


# ==============================================================================
# Field rules shared by drafts and partial updates
# ==============================================================================


def _error(field_name: str, message: str, code: str) -> dict[str, str]:
    return {"field": field_name, "message": message, "code": code}


def _field_errors(
    name: str | None,
    price: Decimal | None,
    original_price: Decimal | None,
    description: str | None,
    stock: int | None,
) -> list[dict[str, str]]:
    errors: list[dict[str, str]] = []

    if name is not None and not 2 <= len(name) <= 100:
        errors.append(_error("name", "Must be between 2 and 100 characters", "INVALID_LENGTH"))
    if price is not None and price <= 0:
        errors.append(_error("price", "Must be positive", "OUT_OF_RANGE"))
    if original_price is not None and original_price <= 0:
        errors.append(_error("original_price", "Must be positive", "OUT_OF_RANGE"))
    if description is not None and not 10 <= len(description) <= 1000:
        errors.append(
            _error("description", "Must be between 10 and 1000 characters", "INVALID_LENGTH")
        )
    if stock is not None and stock < 0:
        errors.append(_error("stock", "Must be >= 0", "OUT_OF_RANGE"))

    return errors
