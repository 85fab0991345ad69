from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Actor roles used for authorization decisions."""

    ADMIN = "admin"
    HR = "hr"
    EMPLOYEE = "employee"


class DayStatus(str, Enum):
    """Attendance status of one employee-day, stored verbatim."""

    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "Half Day"
    LEAVE = "Leave"
    HOLIDAY = "Holiday"
    WEEK_OFF = "Week Off"


OFF_DAY_STATUSES = frozenset({DayStatus.LEAVE, DayStatus.HOLIDAY, DayStatus.WEEK_OFF})

# Statuses for which punches are kept on save.
PUNCHED_STATUSES = frozenset({DayStatus.PRESENT, DayStatus.HALF_DAY, DayStatus.ABSENT})


class ShiftType(str, Enum):
    DAY = "day"
    NIGHT = "night"
    SUNDAY = "sunday"


class ApprovalStatus(str, Enum):
    """Per employee-month approval state. No record means not yet submitted."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"


class ChangeType(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    TOGGLE = "toggle"
