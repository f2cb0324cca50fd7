"""Catalog query pipeline: filter, sort and paginate a product collection.

Pure functions only. The input collection is never mutated, so the same
(items, query) pair always yields the same page.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from storefront_lite.domain.product import Product, ProductQuery, SortKey


@dataclass(frozen=True, slots=True)
class CatalogPage:
    products: list[Product]
    total_count: int  # Matching products before paging
    current_page: int
    total_pages: int
    has_next: bool
    has_prev: bool


def query_catalog(items: Sequence[Product], query: ProductQuery) -> CatalogPage:
    """
    Run the full pipeline over ``items``.

    Stages run in a fixed order: category, search, price range, rating,
    sort, then pagination. Sorting always sees the fully filtered set.

    Args:
        items: Product collection in catalog (featured) order
        query: Filter, sort and paging parameters

    Returns:
        CatalogPage with the requested slice and pagination metadata

    Raises:
        QueryValidationError: If the query is out of range
    """
    query.validate()

    matches = [product for product in items if _matches(product, query)]
    ordered = _sort(matches, query.sort_by)
    total_count = len(ordered)

    start = query.offset
    end = start + query.limit

    return CatalogPage(
        products=ordered[start:end],
        total_count=total_count,
        current_page=query.page,
        total_pages=math.ceil(total_count / query.limit),
        has_next=end < total_count,
        has_prev=start > 0,
    )


def _matches(product: Product, query: ProductQuery) -> bool:
    if query.category and query.category.lower() not in product.category.lower():
        return False
    if query.search:
        term = query.search.lower()
        if term not in product.name.lower() and term not in product.description.lower():
            return False
    if query.min_price is not None and product.price < query.min_price:
        return False
    if query.max_price is not None and product.price > query.max_price:
        return False
    if query.min_rating is not None and product.rating < query.min_rating:
        return False
    return True


def _sort(products: list[Product], sort_by: SortKey) -> list[Product]:
    # sorted() is stable, including with reverse=True
    if sort_by is SortKey.PRICE_ASC:
        return sorted(products, key=lambda p: p.price)
    if sort_by is SortKey.PRICE_DESC:
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort_by is SortKey.RATING:
        return sorted(products, key=lambda p: p.rating, reverse=True)
    if sort_by is SortKey.NEWEST:
        # Ties on created_at come out in reverse catalog order
        return sorted(reversed(products), key=lambda p: p.created_at, reverse=True)
    return list(products)
