from __future__ import annotations

from abc import ABC, abstractmethod


class CartStorage(ABC):
    """
    Port for persisting cart snapshots.

    A plain key-value contract: each cart lives in one named slot holding an
    opaque string blob. Implementations never interpret the blob; decoding
    (and recovering from corrupt data) is the ledger's job.
    """

    @abstractmethod
    def load(self, slot: str) -> str | None:
        """Return the blob stored under ``slot``, or None if the slot is empty."""
        ...

    @abstractmethod
    def save(self, slot: str, blob: str) -> None:
        """Store ``blob`` under ``slot``, replacing any previous value."""
        ...
