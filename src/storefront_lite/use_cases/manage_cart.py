from __future__ import annotations

from storefront_lite.domain.cart import DEFAULT_CART_SLOT, CartLedger, CartProduct
from storefront_lite.domain.errors import NotFoundError
from storefront_lite.ports.cart_storage import CartStorage
from storefront_lite.ports.product_catalog_repository import ProductCatalogRepository


class ManageCart:
    """
    Server-side cart operations, one ledger per cart id.

    Each call rehydrates the ledger from its storage slot, applies one
    mutation (which persists the new snapshot) and hands the ledger back
    for rendering. Ledger semantics apply unchanged: unknown item ids are
    no-ops and a quantity <= 0 removes the item.
    """

    def __init__(
        self,
        cart_storage: CartStorage,
        product_catalog_repository: ProductCatalogRepository,
    ) -> None:
        self._storage = cart_storage
        self._products = product_catalog_repository

    def open(self, cart_id: str) -> CartLedger:
        return CartLedger(self._storage, slot=cart_slot(cart_id))

    def add_product(self, cart_id: str, product_id: str, variant: str | None = None) -> CartLedger:
        """
        Add one unit of a catalog product, snapshotting its current name and price.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        product = self._products.get_by_id(product_id)
        if product is None:
            raise NotFoundError(resource="Product", identifier=product_id)

        ledger = self.open(cart_id)
        ledger.add_item(
            CartProduct(
                id=product.id,
                name=product.name,
                price=product.price,
                image=product.image,
                variant=variant,
            )
        )
        return ledger

    def update_quantity(self, cart_id: str, item_id: str, quantity: int) -> CartLedger:
        ledger = self.open(cart_id)
        ledger.update_quantity(item_id, quantity)
        return ledger

    def remove_item(self, cart_id: str, item_id: str) -> CartLedger:
        ledger = self.open(cart_id)
        ledger.remove_item(item_id)
        return ledger

    def clear(self, cart_id: str) -> CartLedger:
        ledger = self.open(cart_id)
        ledger.clear_cart()
        return ledger


def cart_slot(cart_id: str) -> str:
    return f"{DEFAULT_CART_SLOT}:{cart_id}"
