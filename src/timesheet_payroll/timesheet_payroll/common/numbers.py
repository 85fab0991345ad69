from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 2) -> float:
    """Round like a ledger does (0.125 -> 0.13), not banker's rounding."""
    quantum = Decimal(1).scaleb(-int(places))
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def to_float(value, default: float = 0.0) -> float:
    """Coerce DB/form values (None, '', Decimal, str) to float."""
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default
