"""Clean one day's punch stamps into canonical Entry/Exit pairs.

Pipeline: parse -> sort -> drop near-duplicates -> merge coffee breaks ->
drop noise blocks -> map onto the three column pairs of the card.
The result is idempotent: feeding `columns` back in yields the same day.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..common.time_utils import minutes_to_time, time_to_minutes
from .model import NormalizationPolicy, NormalizedDay, PunchPair

logger = logging.getLogger(__name__)

DEFAULT_POLICY = NormalizationPolicy()


def parse_punches(raw_punches: Iterable[Optional[str]]) -> list[int]:
    """Parse every readable punch; unreadable ones are silently dropped."""
    values = []
    for raw in raw_punches:
        minutes = time_to_minutes(raw)
        if minutes is not None:
            values.append(minutes)
    return values


def drop_near_duplicates(values: Sequence[int], threshold: int) -> list[int]:
    """Drop a stamp read again less than `threshold` minutes after the last kept one."""
    kept: list[int] = []
    for value in values:
        if kept and value - kept[-1] < threshold:
            continue
        kept.append(value)
    return kept


def merge_short_breaks(values: Sequence[int], threshold: int) -> list[int]:
    """Fuse two blocks separated by a short Exit->Entry gap (coffee break)."""
    merged = list(values)
    restart = True
    while restart:
        restart = False
        for i in range(1, len(merged) - 1, 2):
            gap = merged[i + 1] - merged[i]
            if 0 < gap < threshold:
                del merged[i : i + 2]
                restart = True
                break
    return merged


def drop_noise_blocks(values: Sequence[int], threshold: int) -> list[int]:
    """Remove Entry/Exit pairs shorter than `threshold` (spurious double stamps)."""
    cleaned = list(values)
    restart = True
    while restart:
        restart = False
        for i in range(0, len(cleaned) - 1, 2):
            if cleaned[i + 1] - cleaned[i] < threshold:
                del cleaned[i : i + 2]
                restart = True
                break
    return cleaned


def to_pairs(values: Sequence[int]) -> tuple[PunchPair, ...]:
    pairs = []
    for i in range(0, len(values), 2):
        exit_minutes = values[i + 1] if i + 1 < len(values) else None
        pairs.append(PunchPair(entry=values[i], exit=exit_minutes))
    return tuple(pairs)


def normalize_punches(
    raw_punches: Iterable[Optional[str]],
    policy: NormalizationPolicy = DEFAULT_POLICY,
) -> NormalizedDay:
    raw_list = [r for r in raw_punches if r is not None]
    parsed = sorted(parse_punches(raw_list))

    values = drop_near_duplicates(parsed, policy.duplicate_threshold)
    values = merge_short_breaks(values, policy.break_merge_threshold)
    values = drop_noise_blocks(values, policy.noise_threshold)

    slots = policy.max_pairs * 2
    if len(values) > slots:
        logger.debug("dropping %d stamps beyond the last column: %s", len(values) - slots, values[slots:])
        values = values[:slots]

    columns = [minutes_to_time(v) for v in values]
    columns += [""] * (slots - len(columns))

    return NormalizedDay(
        pairs=to_pairs(values),
        columns=tuple(columns),
        sorted_raw=tuple(sorted(r for r in raw_list if r.strip())),
        parsed_count=len(parsed),
    )


def calculate_daily_minutes(
    raw_punches: Iterable[Optional[str]],
    policy: NormalizationPolicy = DEFAULT_POLICY,
) -> int:
    """Worked minutes of a day straight from its raw punches."""
    return sum(pair.duration for pair in normalize_punches(raw_punches, policy).pairs)
