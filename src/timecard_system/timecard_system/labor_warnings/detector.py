from __future__ import annotations

from ..core.constants import LUNCH_REQUIRED_AFTER_MINUTES, MAX_BREAK_MINUTES, MAX_SHIFT_MINUTES, MIN_LUNCH_MINUTES
from ..core.enums import LaborWarning
from ..punches.model import NormalizedDay


def break_gaps(normalized: NormalizedDay) -> list[int]:
    """Exit->Entry gaps between consecutive normalized pairs."""
    gaps = []
    pairs = normalized.pairs
    for current, following in zip(pairs, pairs[1:]):
        if current.exit is not None:
            gaps.append(following.entry - current.exit)
    return gaps


def detect_labor_warnings(normalized: NormalizedDay, total_worked: int) -> list[LaborWarning]:
    """Flags for human review. Advisory only: never feeds back into totals."""
    warnings: list[LaborWarning] = []

    if normalized.parsed_count % 2 == 1:
        warnings.append(LaborWarning.ODD_PUNCH_COUNT)

    if total_worked > MAX_SHIFT_MINUTES:
        warnings.append(LaborWarning.SHIFT_OVER_12H)

    gaps = break_gaps(normalized)
    if any(gap > MAX_BREAK_MINUTES for gap in gaps):
        warnings.append(LaborWarning.LONG_BREAK)

    if total_worked > LUNCH_REQUIRED_AFTER_MINUTES and not any(gap >= MIN_LUNCH_MINUTES for gap in gaps):
        warnings.append(LaborWarning.NO_LUNCH_BREAK)

    return warnings
