"""
Test suite for the catalog query pipeline.

Covers each stage (category, search, price, rating, sort, paging) and the
properties the pipeline guarantees: purity, stable ordering and exact
pagination metadata.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from storefront_lite.domain.catalog_query import query_catalog
from storefront_lite.domain.product import Product, ProductQuery, QueryValidationError, SortKey


@pytest.fixture
def catalog(make_product) -> list[Product]:
    """Mixed catalog in featured order."""
    return [
        make_product(
            "1",
            name="Wireless Bluetooth Headphones",
            price=Decimal("199.99"),
            rating=4.8,
            category="Electronics",
            description="Noise cancelling over-ear headphones",
        ),
        make_product(
            "2",
            name="Smart Fitness Watch",
            price=Decimal("249.99"),
            rating=4.7,
            category="Consumer Electronics",
            description="Heart rate monitor and GPS",
        ),
        make_product(
            "3",
            name="Premium Coffee Maker",
            price=Decimal("89.99"),
            rating=4.6,
            category="Home & Garden",
            description="Automatic drip coffee maker with timer",
        ),
        make_product(
            "4",
            name="Designer Backpack",
            price=Decimal("79.99"),
            rating=4.9,
            category="Fashion",
            description="Stylish and durable backpack",
        ),
    ]


def _ids(products: list[Product]) -> list[str]:
    return [p.id for p in products]


# ==============================================================================
# Filters
# ==============================================================================


def test_no_filters_returns_catalog_order(catalog: list[Product]) -> None:
    page = query_catalog(catalog, ProductQuery())

    assert _ids(page.products) == ["1", "2", "3", "4"]
    assert page.total_count == 4


def test_category_filter_is_case_insensitive_substring(catalog: list[Product]) -> None:
    page = query_catalog(catalog, ProductQuery(category="electronics"))

    assert _ids(page.products) == ["1", "2"]
    assert all("electronics" in p.category.lower() for p in page.products)


def test_search_matches_name_or_description(catalog: list[Product]) -> None:
    by_name = query_catalog(catalog, ProductQuery(search="WATCH"))
    by_description = query_catalog(catalog, ProductQuery(search="drip"))

    assert _ids(by_name.products) == ["2"]
    assert _ids(by_description.products) == ["3"]


def test_price_bounds_are_inclusive(catalog: list[Product]) -> None:
    page = query_catalog(
        catalog, ProductQuery(min_price=Decimal("89.99"), max_price=Decimal("199.99"))
    )

    assert _ids(page.products) == ["1", "3"]


def test_price_bounds_apply_independently(catalog: list[Product]) -> None:
    floor_only = query_catalog(catalog, ProductQuery(min_price=Decimal("200")))
    ceiling_only = query_catalog(catalog, ProductQuery(max_price=Decimal("80")))

    assert _ids(floor_only.products) == ["2"]
    assert _ids(ceiling_only.products) == ["4"]


def test_min_rating_is_inclusive(catalog: list[Product]) -> None:
    page = query_catalog(catalog, ProductQuery(min_rating=4.8))

    assert _ids(page.products) == ["1", "4"]


def test_filters_combine_with_and(catalog: list[Product]) -> None:
    page = query_catalog(
        catalog,
        ProductQuery(category="electronics", max_price=Decimal("200"), min_rating=4.5),
    )

    assert _ids(page.products) == ["1"]


def test_no_match_yields_empty_page(catalog: list[Product]) -> None:
    page = query_catalog(catalog, ProductQuery(search="submarine"))

    assert page.products == []
    assert page.total_count == 0
    assert page.total_pages == 0
    assert page.has_next is False
    assert page.has_prev is False


# ==============================================================================
# Sorting
# ==============================================================================


def test_price_asc(catalog: list[Product]) -> None:
    page = query_catalog(catalog, ProductQuery(sort_by=SortKey.PRICE_ASC))

    assert [p.price for p in page.products] == [
        Decimal("79.99"),
        Decimal("89.99"),
        Decimal("199.99"),
        Decimal("249.99"),
    ]


def test_price_desc(catalog: list[Product]) -> None:
    page = query_catalog(catalog, ProductQuery(sort_by=SortKey.PRICE_DESC))

    assert _ids(page.products) == ["2", "1", "3", "4"]


def test_rating_sorts_descending(catalog: list[Product]) -> None:
    page = query_catalog(catalog, ProductQuery(sort_by=SortKey.RATING))

    assert _ids(page.products) == ["4", "1", "2", "3"]


def test_sort_is_stable_for_equal_keys(make_product) -> None:
    items = [make_product(str(i), price=Decimal("5.00")) for i in range(1, 5)]

    asc = query_catalog(items, ProductQuery(sort_by=SortKey.PRICE_ASC))
    desc = query_catalog(items, ProductQuery(sort_by=SortKey.PRICE_DESC))

    assert _ids(asc.products) == ["1", "2", "3", "4"]
    assert _ids(desc.products) == ["1", "2", "3", "4"]


def test_newest_orders_by_created_at_descending(make_product) -> None:
    items = [
        make_product("a", created_at=datetime(2024, 3, 1, tzinfo=timezone.utc)),
        make_product("b", created_at=datetime(2024, 5, 1, tzinfo=timezone.utc)),
        make_product("c", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc)),
    ]

    page = query_catalog(items, ProductQuery(sort_by=SortKey.NEWEST))

    assert _ids(page.products) == ["b", "a", "c"]


def test_newest_ties_come_out_in_reverse_catalog_order(make_product) -> None:
    same_moment = datetime(2024, 1, 1, tzinfo=timezone.utc)
    items = [make_product(str(i), created_at=same_moment) for i in range(1, 5)]

    page = query_catalog(items, ProductQuery(sort_by=SortKey.NEWEST))

    assert _ids(page.products) == ["4", "3", "2", "1"]


def test_sort_sees_the_filtered_set_only(catalog: list[Product]) -> None:
    page = query_catalog(
        catalog, ProductQuery(category="electronics", sort_by=SortKey.PRICE_ASC)
    )

    assert _ids(page.products) == ["1", "2"]


# ==============================================================================
# Pagination
# ==============================================================================


@pytest.fixture
def fourteen_items(make_product) -> list[Product]:
    return [make_product(str(i)) for i in range(1, 15)]


def test_first_page_of_fourteen(fourteen_items: list[Product]) -> None:
    page = query_catalog(fourteen_items, ProductQuery(page=1, limit=12))

    assert len(page.products) == 12
    assert page.total_count == 14
    assert page.total_pages == 2
    assert page.current_page == 1
    assert page.has_next is True
    assert page.has_prev is False


def test_second_page_of_fourteen(fourteen_items: list[Product]) -> None:
    page = query_catalog(fourteen_items, ProductQuery(page=2, limit=12))

    assert _ids(page.products) == ["13", "14"]
    assert page.has_next is False
    assert page.has_prev is True


def test_page_past_the_end_is_empty(fourteen_items: list[Product]) -> None:
    page = query_catalog(fourteen_items, ProductQuery(page=5, limit=12))

    assert page.products == []
    assert page.total_count == 14
    assert page.has_next is False
    assert page.has_prev is True


def test_exact_multiple_has_no_next_page(make_product) -> None:
    items = [make_product(str(i)) for i in range(1, 13)]

    page = query_catalog(items, ProductQuery(limit=12))

    assert page.total_pages == 1
    assert page.has_next is False


# ==============================================================================
# Purity
# ==============================================================================


def test_pipeline_is_idempotent(catalog: list[Product]) -> None:
    query = ProductQuery(search="e", sort_by=SortKey.PRICE_DESC, limit=2)

    assert query_catalog(catalog, query) == query_catalog(catalog, query)


def test_pipeline_does_not_mutate_input(catalog: list[Product]) -> None:
    before = list(catalog)

    query_catalog(catalog, ProductQuery(sort_by=SortKey.NEWEST))
    query_catalog(catalog, ProductQuery(sort_by=SortKey.PRICE_ASC))

    assert catalog == before


def test_invalid_query_is_rejected(catalog: list[Product]) -> None:
    with pytest.raises(QueryValidationError):
        query_catalog(catalog, ProductQuery(page=0))
