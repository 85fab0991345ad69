"""Clock-punch arithmetic.

Punches travel as 12-hour strings ("9:05 AM"); calculations use decimal hours
in ``[0, 24)``. All functions here are pure.
"""

from __future__ import annotations

import re
from typing import Optional

from .numbers import round_half_up

_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*(AM|PM)\s*$", re.IGNORECASE)


def parse_clock(text: Optional[str]) -> Optional[float]:
    """Parse "H:MM AM/PM" into decimal hours; ``None`` when empty or malformed."""
    if not text:
        return None
    match = _CLOCK_RE.match(text)
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2))
    if not 1 <= hour <= 12 or minute > 59:
        return None

    meridiem = match.group(3).upper()
    if meridiem == "PM" and hour != 12:
        hour += 12
    elif meridiem == "AM" and hour == 12:
        hour = 0
    return hour + minute / 60


def format_duration(hours: float) -> str:
    """Format decimal hours as "H:MM"; negative values get a leading "-"."""
    if not hours:
        return "0:00"
    total_minutes = int(round_half_up(abs(hours) * 60, 0))
    sign = "-" if hours < 0 and total_minutes else ""
    h, m = divmod(total_minutes, 60)
    return f"{sign}{h}:{m:02d}"


def format_hours_hm(hours: float) -> str:
    """Format decimal hours as "Xh Ym" (approval screens)."""
    total_minutes = int(round_half_up(abs(hours or 0) * 60, 0))
    h, m = divmod(total_minutes, 60)
    sign = "-" if (hours or 0) < 0 and total_minutes else ""
    return f"{sign}{h}h {m}m"


def to_clock(hours: float) -> str:
    """Inverse of :func:`parse_clock`; values past midnight wrap around."""
    total_minutes = int(round_half_up((hours % 24) * 60, 0)) % (24 * 60)
    h24, minute = divmod(total_minutes, 60)
    meridiem = "PM" if h24 >= 12 else "AM"
    h12 = h24 % 12 or 12
    return f"{h12}:{minute:02d} {meridiem}"


def clock_to_decimal(text: Optional[str]) -> float:
    """Decimal hours rounded to 2 places, 0 for a missing punch (exports)."""
    value = parse_clock(text)
    if value is None:
        return 0.0
    return round_half_up(value, 2)
