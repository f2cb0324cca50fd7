"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from storefront_lite.domain.errors import NotFoundError
from storefront_lite.domain.product import Product
from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    """Request to get a product by ID."""

    product_id: str


@dataclass(frozen=True, slots=True)
class GetProductByIdResponse:
    """Response containing the requested product."""

    product: Product


class GetProductById:
    """
    Use case for retrieving a single product by ID.

    Responsibilities:
    - Delegate to repository for data access
    - Raise NotFoundError if product doesn't exist
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: GetProductByIdRequest) -> GetProductByIdResponse:
        """
        Raises:
            NotFoundError: If product with given ID doesn't exist
        """
        product = self._repository.get_by_id(request.product_id)

        if product is None:
            raise NotFoundError(resource="Product", identifier=request.product_id)

        return GetProductByIdResponse(product=product)
