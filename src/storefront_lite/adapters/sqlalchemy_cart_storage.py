from __future__ import annotations

from sqlalchemy.orm import Session

from storefront_lite.infra.db.models.cart_slot import CartSlotRow
from storefront_lite.ports.cart_storage import CartStorage


class SqlAlchemyCartStorage(CartStorage):
    """Cart slots in the ``cart_slots`` table; one row per slot, upserted on save."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def load(self, slot: str) -> str | None:
        row = self._session.get(CartSlotRow, slot)
        return row.blob if row else None

    def save(self, slot: str, blob: str) -> None:
        row = self._session.get(CartSlotRow, slot)
        if row is None:
            self._session.add(CartSlotRow(slot=slot, blob=blob))
        else:
            row.blob = blob
        self._session.flush()
