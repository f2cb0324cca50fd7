"""
Test suite for SearchProductCatalog use case.

The use case loads the full catalog from the repository and hands it to the
query pipeline; it must not filter on its own.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from storefront_lite.domain.product import Product, ProductQuery, QueryValidationError, SortKey
from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository
from storefront_lite.use_cases.search_product_catalog import (
    SearchProductCatalog,
    SearchProductCatalogRequest,
    SearchProductCatalogResponse,
)


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock repository for testing UseCase in isolation."""
    return Mock(spec=ProductCatalogRepository)


@pytest.fixture()
def sample_products(make_product) -> list[Product]:
    return [
        make_product("1", price=Decimal("199.99"), category="Electronics"),
        make_product("2", price=Decimal("29.99"), category="Sports"),
        make_product("3", price=Decimal("59.99"), category="Electronics"),
    ]


# ==============================================================================
# Happy Path
# ==============================================================================


def test_execute_runs_pipeline_over_full_catalog(
    mock_repository: Mock, sample_products: list[Product]
) -> None:
    mock_repository.list_all.return_value = sample_products
    use_case = SearchProductCatalog(mock_repository)

    response = use_case.execute(
        SearchProductCatalogRequest(
            query=ProductQuery(category="electronics", sort_by=SortKey.PRICE_ASC)
        )
    )

    assert isinstance(response, SearchProductCatalogResponse)
    assert [p.id for p in response.page.products] == ["3", "1"]
    assert response.page.total_count == 2
    mock_repository.list_all.assert_called_once_with()


def test_execute_with_empty_catalog(mock_repository: Mock) -> None:
    mock_repository.list_all.return_value = []

    response = SearchProductCatalog(mock_repository).execute(
        SearchProductCatalogRequest(query=ProductQuery())
    )

    assert response.page.products == []
    assert response.page.total_pages == 0


# ==============================================================================
# Validation
# ==============================================================================


def test_invalid_query_never_reaches_repository(mock_repository: Mock) -> None:
    use_case = SearchProductCatalog(mock_repository)

    with pytest.raises(QueryValidationError, match="limit must be <= 100"):
        use_case.execute(SearchProductCatalogRequest(query=ProductQuery(limit=101)))

    mock_repository.list_all.assert_not_called()


def test_float_price_is_rejected(mock_repository: Mock) -> None:
    use_case = SearchProductCatalog(mock_repository)

    with pytest.raises(QueryValidationError, match="min_price must be Decimal"):
        use_case.execute(
            SearchProductCatalogRequest(query=ProductQuery(min_price=1.5))  # type: ignore[arg-type]
        )
