from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.enums import ChangeType


@dataclass(frozen=True)
class SalaryChange:
    """One monitored field that differs between two salary snapshots."""

    field: str
    field_label: str
    old_value: Union[float, bool]
    new_value: Union[float, bool]
    change_type: ChangeType
    change_amount: Optional[float] = None
    change_percentage: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "field_label": self.field_label,
            "old_value": self.old_value,
            "new_value": self.new_value,
            "change_type": self.change_type.value,
            "change_amount": self.change_amount,
            "change_percentage": self.change_percentage,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SalaryChange":
        return cls(
            field=data["field"],
            field_label=data.get("field_label") or data["field"],
            old_value=data["old_value"],
            new_value=data["new_value"],
            change_type=ChangeType(data["change_type"]),
            change_amount=data.get("change_amount"),
            change_percentage=data.get("change_percentage"),
        )


@dataclass(frozen=True)
class SalaryRevision:
    """Immutable ledger entry; appended once, never edited or removed."""

    revision_id: str
    employee_id: str
    employee_name: str
    revision_date: date
    effective_from: date
    changed_by: str
    changed_by_name: str
    changes: tuple[SalaryChange, ...]
    reason: str
    timestamp: int
    previous_salary: float
    new_salary: float
    increment_percentage: float
