from __future__ import annotations

from storefront_lite.ports.cart_storage import CartStorage


class InMemoryCartStorage(CartStorage):
    """Dict-backed slots. Survives for the life of the process only."""

    def __init__(self, slots: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(slots or {})

    def load(self, slot: str) -> str | None:
        return self._slots.get(slot)

    def save(self, slot: str, blob: str) -> None:
        self._slots[slot] = blob
