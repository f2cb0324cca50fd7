from __future__ import annotations

from typing import Iterable

from storefront_lite.domain.product import Product
from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository


class InMemoryProductCatalogRepository(ProductCatalogRepository):
    """
    Canonical contract implementation, also used as the default store.

    - Stores products in insertion order
    - One instance per application; no locking (one writer at a time is assumed)
    - Hands out copies of its list so callers cannot reorder the catalog
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: list[Product] = list(products)

    def list_all(self) -> list[Product]:
        return list(self._products)

    def get_by_id(self, product_id: str) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    def add(self, product: Product) -> None:
        self._products.append(product)

    def update(self, product: Product) -> bool:
        index = self._index_of(product.id)
        if index is None:
            return False

        self._products[index] = product
        return True

    def delete(self, product_id: str) -> bool:
        index = self._index_of(product_id)
        if index is None:
            return False

        del self._products[index]
        return True

    def list_categories(self) -> list[str]:
        # dict keeps first-seen order
        return list(dict.fromkeys(p.category for p in self._products))

    def _index_of(self, product_id: str) -> int | None:
        return next(
            (i for i, p in enumerate(self._products) if p.id == product_id),
            None,
        )
