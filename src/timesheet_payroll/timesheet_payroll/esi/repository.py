from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EsiEntry


class EsiRepository(Protocol):
    def get(self, month: str, employee_id: str) -> Optional[EsiEntry]:
        raise NotImplementedError

    def list_for_month(self, month: str) -> Sequence[EsiEntry]:
        raise NotImplementedError

    def save_all(self, entries: Sequence[EsiEntry]) -> None:
        """Write all entries in one transaction."""

        raise NotImplementedError
