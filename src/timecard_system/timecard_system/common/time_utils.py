from __future__ import annotations

import re
from datetime import date
from typing import Optional

_UNCERTAINTY_CHARS = ("?", "[", "]")

# Dot-matrix stamps are often misread as letters.
_OCR_SUBSTITUTIONS = (
    (re.compile(r"[oö]"), "0"),
    (re.compile(r"[li|]"), "1"),
    (re.compile(r"s"), "5"),
    (re.compile(r"b"), "8"),
    (re.compile(r"g"), "9"),
)
_SEPARATORS = re.compile(r"[.h\s]")
_REPEATED_COLONS = re.compile(r":+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(value: str) -> Optional[int]:
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


def time_to_minutes(value: Optional[str]) -> Optional[int]:
    """Convert a punch string to minutes since midnight.

    Handles "08:00", "8:00", "0800", "800", "08.00", "8h00", "08 00" and the
    usual OCR artifacts ("O8:SO", "I0:00"). Returns None for anything that
    cannot be read, including uncertainty markers like "[?]".
    """
    if not value:
        return None
    if any(ch in value for ch in _UNCERTAINTY_CHARS):
        return None

    clean = value.lower().strip()
    for pattern, replacement in _OCR_SUBSTITUTIONS:
        clean = pattern.sub(replacement, clean)

    clean = _SEPARATORS.sub(":", clean)
    clean = _REPEATED_COLONS.sub(":", clean)

    if ":" not in clean:
        if len(clean) == 4:
            clean = f"{clean[:2]}:{clean[2:]}"
        elif len(clean) == 3:
            clean = f"{clean[:1]}:{clean[1:]}"

    parts = clean.split(":")
    if len(parts) < 2:
        return None

    hours = _leading_int(parts[0])
    minutes = _leading_int(parts[1])
    if hours is None or minutes is None:
        return None
    if not (0 <= hours <= 24) or not (0 <= minutes <= 59):
        return None

    return hours * 60 + minutes


def minutes_to_time(total_minutes: int) -> str:
    """Format minutes as HH:MM, with a leading '-' for negative balances."""
    sign = "-" if total_minutes < 0 else ""
    absolute = abs(int(total_minutes))
    return f"{sign}{absolute // 60:02d}:{absolute % 60:02d}"


def safe_date(year: int, month: int, day: int) -> Optional[date]:
    """date(year, month, day) or None for an impossible calendar date."""
    try:
        return date(year, month, day)
    except (TypeError, ValueError):
        return None


def weekday_index(value: date) -> int:
    """0=Sunday..6=Saturday (Python's weekday() starts on Monday)."""
    return (value.weekday() + 1) % 7


def week_of_year(value: date) -> int:
    """Sunday-start week number, 1-indexed, counted from January 1st."""
    jan_first = date(value.year, 1, 1)
    ordinal = (value - jan_first).days
    return (ordinal + weekday_index(jan_first)) // 7 + 1
