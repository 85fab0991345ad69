from __future__ import annotations

from typing import Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_for_month(self, year: int, month: int) -> Sequence[Holiday]:
        """Holidays dated in the month, plus recurring ones that fall in it any year."""

        raise NotImplementedError
