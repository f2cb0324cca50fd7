from __future__ import annotations

from abc import ABC, abstractmethod

from storefront_lite.domain.product import Product


class ProductCatalogRepository(ABC):
    """
    Port for catalog data access.

    The repository is a plain store: it keeps products in catalog (insertion)
    order and knows nothing about filtering, sorting or paging. Those belong
    to the query pipeline, which runs over ``list_all()``.

    Contract:
        - list_all() returns products in insertion order
        - get_by_id() returns None for unknown identities
        - update() and delete() report whether the identity existed
        - Implementations do not re-validate products (use cases do)
    """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in catalog order."""
        ...

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        ...

    @abstractmethod
    def add(self, product: Product) -> None:
        ...

    @abstractmethod
    def update(self, product: Product) -> bool:
        """
        Replace the stored record with the same identity.

        Returns:
            False if no product with that identity exists
        """
        ...

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """
        Remove a product.

        Returns:
            False if no product with that identity exists
        """
        ...

    @abstractmethod
    def list_categories(self) -> list[str]:
        """Distinct category labels, in order of first appearance."""
        ...
