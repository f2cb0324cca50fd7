from __future__ import annotations

from dataclasses import dataclass

from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class ListProductCategoriesResponse:
    categories: list[str]


class ListProductCategories:
    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self) -> ListProductCategoriesResponse:
        return ListProductCategoriesResponse(categories=self._repository.list_categories())
