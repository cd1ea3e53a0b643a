from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.constants import (
    DEFAULT_BREAK_MERGE_THRESHOLD_MINUTES,
    DEFAULT_DUPLICATE_THRESHOLD_MINUTES,
    DEFAULT_NOISE_THRESHOLD_MINUTES,
    MAX_PUNCH_PAIRS,
)
from ..core.enums import DsrOverride, SundayMode


@dataclass(frozen=True)
class NormalizationPolicy:
    """Thresholds (minutes) used to clean a day's punches."""

    duplicate_threshold: int = DEFAULT_DUPLICATE_THRESHOLD_MINUTES
    break_merge_threshold: int = DEFAULT_BREAK_MERGE_THRESHOLD_MINUTES
    noise_threshold: int = DEFAULT_NOISE_THRESHOLD_MINUTES
    max_pairs: int = MAX_PUNCH_PAIRS


@dataclass(frozen=True)
class PunchPair:
    entry: int
    exit: Optional[int] = None

    @property
    def duration(self) -> int:
        if self.exit is None or self.exit <= self.entry:
            return 0
        return self.exit - self.entry


@dataclass(frozen=True)
class NormalizedDay:
    """Result of cleaning one day's punches.

    `pairs` may end with a pair whose exit is missing (odd number of stamps).
    `sorted_raw` keeps what the OCR read, for the training-diff collaborator.
    """

    pairs: tuple[PunchPair, ...]
    columns: tuple[str, ...]
    sorted_raw: tuple[str, ...] = ()
    parsed_count: int = 0


@dataclass(frozen=True)
class DayRecord:
    """One calendar day of one employee's card."""

    calendar_day: int
    raw_punches: tuple[str, ...] = ()
    day_label: Optional[str] = None
    original_punches: tuple[str, ...] = field(default=(), compare=False)
    is_explicit_weekend: bool = False
    is_aboned: bool = False
    sunday_mode: SundayMode = SundayMode.AUTO
    dsr_override: DsrOverride = DsrOverride.NONE

    @property
    def force_dsr(self) -> bool:
        return self.dsr_override is DsrOverride.FORCED

    @property
    def manually_disabled_dsr(self) -> bool:
        return self.dsr_override is DsrOverride.DISABLED

    def label_contains(self, markers: tuple[str, ...]) -> bool:
        label = (self.day_label or "").upper()
        return any(marker in label for marker in markers)
