"""Ingestion adapter for OCR day rows.

The vision service answers in one of two shapes per day:

    {"day": "16", "dayLabel": "SEG", "isWeekend": false,
     "entry1": "08:00", "exit1": "12:00", ..., "exit3": ""}

    {"day": "16", "dayLabel": "SEG", "isWeekend": false,
     "timestamps": ["08:00", "12:00", "13:00", "17:00"]}

Both reduce to the same raw punch sequence before normalization runs.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping, Optional

from ..core.constants import ABSENCE_LABELS, PUNCH_COLUMNS, UNCERTAIN_MARKER
from .model import DayRecord, NormalizationPolicy
from .normalizer import DEFAULT_POLICY, normalize_punches

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")


def parse_day_number(value: Any) -> Optional[int]:
    digits = _NON_DIGITS.sub("", str(value if value is not None else ""))
    if not digits:
        return None
    return int(digits)


def is_useful(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != "" and value != UNCERTAIN_MARKER


def _timestamps(row: Mapping[str, Any]) -> list[str]:
    value = row.get("timestamps")
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v) for v in value if v is not None]


def merge_ocr_rows(rows: Iterable[Mapping[str, Any]]) -> list[dict]:
    """Merge rows read for the same day (several images of one card).

    Keeps the first useful label and column values, unions the timestamp
    lists (first-seen order) and ORs the weekend flag. Rows without a day
    number are dropped.
    """
    merged: dict[int, dict] = {}

    for row in rows:
        day = parse_day_number(row.get("day"))
        if day is None:
            logger.debug("skipping OCR row without a day number: %r", row.get("day"))
            continue

        existing = merged.get(day)
        if existing is None:
            merged[day] = {**row, "day": str(day), "timestamps": _timestamps(row)}
            continue

        if not is_useful(existing.get("dayLabel")) and is_useful(row.get("dayLabel")):
            existing["dayLabel"] = row["dayLabel"]

        for column in PUNCH_COLUMNS:
            if not is_useful(existing.get(column)) and is_useful(row.get(column)):
                existing[column] = row[column]

        for ts in _timestamps(row):
            if ts not in existing["timestamps"]:
                existing["timestamps"].append(ts)

        existing["isWeekend"] = bool(existing.get("isWeekend")) or bool(row.get("isWeekend"))

    return [merged[day] for day in sorted(merged)]


def raw_punches_from_row(row: Mapping[str, Any]) -> list[str]:
    """Canonical raw punch sequence for either OCR row shape."""
    label = str(row.get("dayLabel") or "").upper()
    if any(marker in label for marker in ABSENCE_LABELS):
        return []

    timestamps = _timestamps(row)
    if timestamps:
        return timestamps

    return [str(row.get(column) or "") for column in PUNCH_COLUMNS]


def ingest_ocr_rows(
    rows: Iterable[Mapping[str, Any]],
    policy: NormalizationPolicy = DEFAULT_POLICY,
) -> list[DayRecord]:
    records = []
    for row in merge_ocr_rows(rows):
        normalized = normalize_punches(raw_punches_from_row(row), policy)
        records.append(
            DayRecord(
                calendar_day=int(row["day"]),
                raw_punches=normalized.columns,
                day_label=row.get("dayLabel") or None,
                original_punches=normalized.sorted_raw,
                is_explicit_weekend=bool(row.get("isWeekend")),
            )
        )
    return records
