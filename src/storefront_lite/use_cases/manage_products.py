"""Admin mutations of the product catalog: create, update, delete.

Authorization is checked before these run (HTTP dependency); the use cases
assume the caller is allowed to write. Writes are not serialized: one writer
at a time is assumed for the in-memory store.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from storefront_lite.domain.errors import NotFoundError
from storefront_lite.domain.product import Product, ProductChanges, ProductDraft
from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_product_id() -> str:
    return str(uuid.uuid4())


class CreateProduct:
    """
    Create a catalog product from an admin draft.

    Defaults for fields the draft does not carry:
    - id: freshly generated
    - rating / reviews: 0
    - specifications: empty mapping
    - original_price: absent
    - created_at: now (UTC)
    """

    def __init__(
        self,
        product_catalog_repository: ProductCatalogRepository,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_product_id,
    ) -> None:
        self._repository = product_catalog_repository
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, draft: ProductDraft) -> Product:
        """
        Raises:
            ValidationError: If the draft breaks a field rule
        """
        draft.validate()

        product = Product(
            id=self._id_factory(),
            name=draft.name,
            price=draft.price,
            original_price=draft.original_price,
            image=draft.image,
            rating=0.0,
            reviews=0,
            category=draft.category,
            description=draft.description,
            stock=draft.stock,
            specifications=dict(draft.specifications or {}),
            created_at=self._clock(),
        )
        self._repository.add(product)

        logger.info("Product created", extra={"product_id": product.id})
        return product


@dataclass(frozen=True, slots=True)
class UpdateProductRequest:
    product_id: str
    changes: ProductChanges


class UpdateProduct:
    """Merge supplied fields over the stored record; the identity never changes."""

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: UpdateProductRequest) -> Product:
        """
        Raises:
            ValidationError: If a supplied field breaks a field rule
            NotFoundError: If the product doesn't exist
        """
        request.changes.validate()

        existing = self._repository.get_by_id(request.product_id)
        if existing is None:
            raise NotFoundError(resource="Product", identifier=request.product_id)

        updated = request.changes.apply_to(existing)
        if not self._repository.update(updated):
            # Deleted between read and write
            raise NotFoundError(resource="Product", identifier=request.product_id)

        logger.info("Product updated", extra={"product_id": updated.id})
        return updated


class DeleteProduct:
    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, product_id: str) -> None:
        """
        Raises:
            NotFoundError: If the product doesn't exist
        """
        if not self._repository.delete(product_id):
            raise NotFoundError(resource="Product", identifier=product_id)

        logger.info("Product deleted", extra={"product_id": product_id})
