from __future__ import annotations

from typing import Protocol


class PayrollCreditRepository(Protocol):
    """Read-only view of the disbursement system's "salary credited" flags."""

    def credited_ids(self, month: str) -> set[str]:
        raise NotImplementedError
