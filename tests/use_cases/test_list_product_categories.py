from __future__ import annotations

from unittest.mock import Mock

from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository
from storefront_lite.use_cases.list_product_categories import ListProductCategories


def test_returns_repository_categories() -> None:
    repository = Mock(spec=ProductCatalogRepository)
    repository.list_categories.return_value = ["Electronics", "Fashion"]

    response = ListProductCategories(repository).execute()

    assert response.categories == ["Electronics", "Fashion"]
