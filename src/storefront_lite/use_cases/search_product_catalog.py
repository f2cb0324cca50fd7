from __future__ import annotations

from dataclasses import dataclass

from storefront_lite.domain.catalog_query import CatalogPage, query_catalog
from storefront_lite.domain.product import ProductQuery
from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchProductCatalogRequest:
    query: ProductQuery


@dataclass(frozen=True, slots=True)
class SearchProductCatalogResponse:
    page: CatalogPage


class SearchProductCatalog:
    """
    Product catalog search with filters, sorting and pagination.

    The repository only supplies the full catalog; filtering, sorting and
    paging are done by the query pipeline so every store behaves the same.
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: SearchProductCatalogRequest) -> SearchProductCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Query parameters (already parsed leniently at the boundary)

        Returns:
            Response containing the requested page and its metadata

        Raises:
            QueryValidationError: If the query parameters are out of range
        """
        request.query.validate()

        page = query_catalog(self._repository.list_all(), request.query)

        return SearchProductCatalogResponse(page=page)
