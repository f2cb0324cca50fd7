from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront_lite.domain.catalog_query import CatalogPage
from storefront_lite.domain.product import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    Product,
    ProductChanges,
    ProductDraft,
    ProductQuery,
    SortKey,
)
from storefront_lite.entrypoints.http.dtos.products import (
    CreateProductRequestDTO,
    ProductResponseDTO,
    ProductsSearchQueryDTO,
    ProductsSearchResponseDTO,
    UpdateProductRequestDTO,
)
from storefront_lite.use_cases.search_product_catalog import SearchProductCatalogRequest


class ProductMapper:
    """Maps between REST DTOs and domain models for the product catalog."""

    @staticmethod
    def to_domain_query(dto: ProductsSearchQueryDTO) -> ProductQuery:
        """
        Converts raw query params to a domain query, leniently.

        - Unparseable numbers are treated as absent (the filter is skipped)
        - page < 1 or unparseable falls back to 1
        - limit < 1 or unparseable falls back to 12; any larger limit is kept
        - Unknown sort keys fall back to "featured"

        Args:
            dto: Raw query parameters

        Returns:
            ProductQuery: Domain query with Decimal prices
        """
        page = _parse_int(dto.page)
        if page is None or page < 1:
            page = DEFAULT_PAGE

        limit = _parse_int(dto.limit)
        if limit is None or limit < 1:
            limit = DEFAULT_PAGE_SIZE

        return ProductQuery(
            category=dto.category or None,
            search=dto.search or None,
            min_price=_parse_decimal(dto.min_price),
            max_price=_parse_decimal(dto.max_price),
            min_rating=_parse_float(dto.min_rating),
            sort_by=SortKey.parse(dto.sort_by),
            page=page,
            limit=limit,
        )

    @staticmethod
    def to_domain_request(dto: ProductsSearchQueryDTO) -> SearchProductCatalogRequest:
        return SearchProductCatalogRequest(query=ProductMapper.to_domain_query(dto))

    @staticmethod
    def to_domain_draft(dto: CreateProductRequestDTO) -> ProductDraft:
        """Prices are rounded half-up to cents."""
        return ProductDraft(
            name=dto.name,
            price=_to_cents(dto.price),
            original_price=_to_cents(dto.original_price),
            image=str(dto.image),
            category=dto.category,
            description=dto.description,
            stock=dto.stock,
            specifications=dto.specifications,
        )

    @staticmethod
    def to_domain_changes(dto: UpdateProductRequestDTO) -> ProductChanges:
        """
        Only fields present in the payload become changes.

        An explicit null originalPrice clears it; other nulls mean "unchanged".
        """
        return ProductChanges(
            name=dto.name,
            price=_to_cents(dto.price),
            original_price=_to_cents(dto.original_price),
            image=str(dto.image) if dto.image is not None else None,
            category=dto.category,
            description=dto.description,
            stock=dto.stock,
            rating=dto.rating,
            reviews=dto.reviews,
            specifications=dto.specifications,
            clear_original_price="original_price" in dto.model_fields_set
            and dto.original_price is None,
        )

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts domain Product entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            original_price=str(product.original_price)
            if product.original_price is not None
            else None,
            image=product.image,
            rating=product.rating,
            reviews=product.reviews,
            category=product.category,
            description=product.description,
            stock=product.stock,
            in_stock=product.in_stock,
            specifications=dict(product.specifications),
            created_at=product.created_at,
        )

    @staticmethod
    def to_search_response(page: CatalogPage) -> ProductsSearchResponseDTO:
        return ProductsSearchResponseDTO(
            products=[ProductMapper.to_product_response(p) for p in page.products],
            total_products=page.total_count,
            current_page=page.current_page,
            total_pages=page.total_pages,
            has_next_page=page.has_next,
            has_prev_page=page.has_prev,
        )


_CENT = Decimal("0.01")


def _to_cents(value: Decimal | None) -> Decimal | None:
    if value is None:
        return None
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_decimal(raw: str | None) -> Decimal | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def _parse_float(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None
