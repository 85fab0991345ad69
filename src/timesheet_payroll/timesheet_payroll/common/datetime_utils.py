from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_month_key(value: str) -> tuple[int, int]:
    """Parse a "YYYY-MM" month key into (year, month)."""
    try:
        parsed = datetime.strptime((value or "").strip(), "%Y-%m")
    except ValueError:
        raise ValidationError(f"Invalid month (YYYY-MM): {value!r}")
    return parsed.year, parsed.month


def month_key(year: int, month: int) -> str:
    return f"{int(year):04d}-{int(month):02d}"


def month_key_of(day: date) -> str:
    return month_key(day.year, day.month)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def iter_month_days(year: int, month: int) -> Iterator[date]:
    first = date(year, month, 1)
    for offset in range(days_in_month(year, month)):
        yield first + timedelta(days=offset)


def is_sunday(day: date) -> bool:
    return day.weekday() == calendar.SUNDAY


def sundays_in_month(year: int, month: int) -> list[date]:
    return [d for d in iter_month_days(year, month) if is_sunday(d)]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)
