"""
Contract tests for InMemoryProductCatalogRepository.

The in-memory store is the canonical implementation of the port: insertion
order is catalog order, ids are looked up exactly, and callers get copies.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from storefront_lite.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from storefront_lite.domain.product import Product


@pytest.fixture
def products(make_product) -> list[Product]:
    return [
        make_product("1", category="Electronics"),
        make_product("2", category="Fashion"),
        make_product("3", category="Electronics"),
    ]


@pytest.fixture
def repository(products: list[Product]) -> InMemoryProductCatalogRepository:
    return InMemoryProductCatalogRepository(products)


def test_list_all_preserves_insertion_order(repository: InMemoryProductCatalogRepository) -> None:
    assert [p.id for p in repository.list_all()] == ["1", "2", "3"]


def test_list_all_returns_a_copy(repository: InMemoryProductCatalogRepository) -> None:
    listed = repository.list_all()
    listed.reverse()

    assert [p.id for p in repository.list_all()] == ["1", "2", "3"]


def test_default_repository_is_empty() -> None:
    assert InMemoryProductCatalogRepository().list_all() == []


def test_get_by_id(repository: InMemoryProductCatalogRepository) -> None:
    product = repository.get_by_id("2")

    assert product is not None
    assert product.category == "Fashion"


def test_get_by_id_unknown_returns_none(repository: InMemoryProductCatalogRepository) -> None:
    assert repository.get_by_id("99") is None


def test_add_appends(repository: InMemoryProductCatalogRepository, make_product) -> None:
    repository.add(make_product("4"))

    assert [p.id for p in repository.list_all()] == ["1", "2", "3", "4"]


def test_update_replaces_in_place(
    repository: InMemoryProductCatalogRepository, make_product
) -> None:
    assert repository.update(make_product("2", price=Decimal("1.23"))) is True

    assert [p.id for p in repository.list_all()] == ["1", "2", "3"]
    assert repository.get_by_id("2").price == Decimal("1.23")  # type: ignore[union-attr]


def test_update_unknown_returns_false(
    repository: InMemoryProductCatalogRepository, make_product
) -> None:
    assert repository.update(make_product("99")) is False
    assert len(repository.list_all()) == 3


def test_delete(repository: InMemoryProductCatalogRepository) -> None:
    assert repository.delete("1") is True
    assert [p.id for p in repository.list_all()] == ["2", "3"]


def test_delete_unknown_returns_false(repository: InMemoryProductCatalogRepository) -> None:
    assert repository.delete("99") is False


def test_list_categories_dedupes_in_first_seen_order(
    repository: InMemoryProductCatalogRepository,
) -> None:
    assert repository.list_categories() == ["Electronics", "Fashion"]


def test_instances_do_not_share_state(products: list[Product], make_product) -> None:
    first = InMemoryProductCatalogRepository(products)
    second = InMemoryProductCatalogRepository(products)

    first.add(make_product("4"))

    assert len(second.list_all()) == 3
