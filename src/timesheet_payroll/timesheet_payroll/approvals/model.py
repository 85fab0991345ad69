from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.enums import ApprovalStatus


@dataclass(frozen=True)
class ApprovalSnapshot:
    """Month counts frozen at submission time."""

    employee_name: str
    department: str
    total_days: int
    present_days: int
    absent_days: int
    leave_days: int
    half_days: int
    ot_hours: float
    pending_hours: float
    net_ot_hours: float
    full_working_days: int
    marked_days: int

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ApprovalSnapshot":
        return cls(**{k: data[k] for k in cls.__dataclass_fields__})


@dataclass(frozen=True)
class AttendanceApproval:
    employee_id: str
    month: str
    status: ApprovalStatus
    snapshot: ApprovalSnapshot
    created_at: int
    updated_at: int
    submitted_by: str = ""
    decided_by: Optional[str] = None
