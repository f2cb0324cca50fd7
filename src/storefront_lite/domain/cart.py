"""Cart ledger: the selected items of one shopper plus their derived total.

Every mutation rebuilds the item list, recomputes the total from scratch
and writes a snapshot to the configured storage slot. Loading never fails:
an absent or unreadable snapshot yields an empty cart.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from storefront_lite.ports.cart_storage import CartStorage


logger = logging.getLogger(__name__)

DEFAULT_CART_SLOT = "cart-storage"


@dataclass(frozen=True, slots=True)
class CartProduct:
    """What gets added to a cart: everything a CartItem has except quantity."""

    id: str
    name: str
    price: Decimal
    image: str
    variant: str | None = None


@dataclass(frozen=True, slots=True)
class CartItem:
    id: str
    name: str
    price: Decimal
    image: str
    quantity: int
    variant: str | None = None

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


CartObserver = Callable[["CartLedger"], None]


class CartLedger:
    """
    In-memory cart with a derived total.

    - Items keep first-add order
    - Total is never settable; it is recomputed on every mutation
    - Unknown ids are silently ignored by remove/update
    - Observers are notified after the snapshot has been saved
    """

    def __init__(self, storage: CartStorage, slot: str = DEFAULT_CART_SLOT) -> None:
        self._storage = storage
        self._slot = slot
        self._observers: list[CartObserver] = []
        self._items: list[CartItem] = self._load()
        self._total = _compute_total(self._items)

    @property
    def slot(self) -> str:
        return self._slot

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    @property
    def total(self) -> Decimal:
        return self._total

    def add_item(self, item: CartProduct) -> None:
        if self._find(item.id) is None:
            items = [
                *self._items,
                CartItem(
                    id=item.id,
                    name=item.name,
                    price=item.price,
                    image=item.image,
                    quantity=1,
                    variant=item.variant,
                ),
            ]
        else:
            items = [
                replace(i, quantity=i.quantity + 1) if i.id == item.id else i
                for i in self._items
            ]
        self._commit(items)

    def remove_item(self, item_id: str) -> None:
        self._commit([i for i in self._items if i.id != item_id])

    def update_quantity(self, item_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(item_id)
            return

        self._commit(
            [replace(i, quantity=quantity) if i.id == item_id else i for i in self._items]
        )

    def clear_cart(self) -> None:
        self._commit([])

    def get_item_count(self) -> int:
        return sum(i.quantity for i in self._items)

    def get_item(self, item_id: str) -> CartItem | None:
        return self._find(item_id)

    def subscribe(self, observer: CartObserver) -> Callable[[], None]:
        """
        Register a callback fired after every mutation.

        Returns:
            A function that removes the observer again
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _find(self, item_id: str) -> CartItem | None:
        return next((i for i in self._items if i.id == item_id), None)

    def _commit(self, items: list[CartItem]) -> None:
        self._items = items
        self._total = _compute_total(items)
        self._storage.save(self._slot, encode_snapshot(self._items, self._total))

        for observer in list(self._observers):
            observer(self)

    def _load(self) -> list[CartItem]:
        blob = self._storage.load(self._slot)
        if blob is None:
            return []

        try:
            return decode_snapshot(blob)
        except (ValueError, TypeError, KeyError, InvalidOperation, RecursionError) as exc:
            logger.warning(
                "Discarding unreadable cart snapshot",
                extra={"slot": self._slot, "error": str(exc)},
            )
            return []


def _compute_total(items: list[CartItem]) -> Decimal:
    return sum((i.line_total for i in items), Decimal("0"))


# ==============================================================================
# Snapshot codec
# ==============================================================================


def encode_snapshot(items: list[CartItem], total: Decimal) -> str:
    """Serialize items and total to JSON; money travels as decimal strings."""
    return json.dumps(
        {
            "items": [
                {
                    "id": i.id,
                    "name": i.name,
                    "price": str(i.price),
                    "image": i.image,
                    "quantity": i.quantity,
                    "variant": i.variant,
                }
                for i in items
            ],
            "total": str(total),
        }
    )


def decode_snapshot(blob: str) -> list[CartItem]:
    """
    Parse a snapshot produced by encode_snapshot.

    The stored total is ignored; callers recompute it from the items.

    Raises:
        ValueError: If the blob is not JSON or does not have the expected shape
        KeyError: If an item misses a required field
        InvalidOperation: If a price is not a decimal
        RecursionError: If the JSON nests too deeply to decode
    """
    data = json.loads(blob)
    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        raise ValueError("cart snapshot must be an object with an 'items' list")

    items: list[CartItem] = []
    seen: set[str] = set()
    for raw in data["items"]:
        item = _decode_item(raw)
        if item.id in seen:
            raise ValueError(f"duplicate cart item id {item.id!r}")
        seen.add(item.id)
        items.append(item)

    return items


def _decode_item(raw: Any) -> CartItem:
    if not isinstance(raw, dict):
        raise ValueError("cart item must be an object")

    price = Decimal(str(raw["price"]))
    if not price.is_finite() or price < 0:
        raise ValueError(f"invalid cart item price {raw['price']!r}")

    quantity = raw["quantity"]
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise ValueError(f"invalid cart item quantity {quantity!r}")

    variant = raw.get("variant")
    if variant is not None and not isinstance(variant, str):
        raise ValueError("cart item variant must be a string")

    return CartItem(
        id=str(raw["id"]),
        name=str(raw["name"]),
        price=price,
        image=str(raw["image"]),
        quantity=quantity,
        variant=variant,
    )
