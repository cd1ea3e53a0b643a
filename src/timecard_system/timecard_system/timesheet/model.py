from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_PERCENT_NORMAL, DEFAULT_PERCENT_SPECIAL, SUNDAY
from ..core.enums import LaborWarning
from ..punches.model import DayRecord, NormalizedDay


@dataclass(frozen=True)
class ClassifiedDay:
    """Pass 1 output: what the calendar, schedule and punches say about a day."""

    record: DayRecord
    work_date: Optional[date]
    weekday: Optional[int]
    week_number: Optional[int]
    holiday_name: Optional[str]
    normalized: NormalizedDay
    worked: int
    target: int
    is_day_off_label: bool
    is_candidate_fault: bool

    @property
    def is_holiday(self) -> bool:
        return self.holiday_name is not None

    @property
    def is_sunday(self) -> bool:
        return self.weekday == SUNDAY


@dataclass(frozen=True)
class RestStatus:
    """Pass 2/3 output: the weekly rest decision for one day."""

    is_fault: bool
    is_compensatory_rest: bool = False
    is_sunday_worked_without_rest: bool = False


@dataclass(frozen=True)
class WeekGroup:
    week_number: int
    member_days: tuple[int, ...]
    has_holiday: bool
    holiday_falls_on_sunday: bool
    has_unresolved_fault: bool

    @property
    def dsr_lost(self) -> int:
        """Lost paid rest days: one per faulty week, two if a weekday holiday fell in it."""
        if not self.has_unresolved_fault:
            return 0
        if self.has_holiday and not self.holiday_falls_on_sunday:
            return 2
        return 1


@dataclass(frozen=True)
class DayResult:
    calendar_day: int
    weekday: Optional[int]
    week_number: Optional[int]
    holiday_name: Optional[str]
    columns: tuple[str, ...]
    total_worked_minutes: int
    target_minutes: int
    balance_minutes: int
    is_falta: bool
    is_waived_absence: bool
    is_compensatory_rest: bool
    is_sunday_worked_without_rest: bool
    is_special_day: bool
    normal_overtime_minutes: int
    special_overtime_minutes: int
    deficit_minutes: int
    is_aboned: bool
    warnings: tuple[LaborWarning, ...] = ()


@dataclass(frozen=True)
class MonthSummary:
    total_normal_overtime: int = 0
    total_special_overtime: int = 0
    total_deficit_minutes: int = 0
    total_absence_days: int = 0
    total_dsr_lost: int = 0
    percent_normal: int = DEFAULT_PERCENT_NORMAL
    percent_special: int = DEFAULT_PERCENT_SPECIAL


@dataclass(frozen=True)
class TimesheetResult:
    days: list[DayResult]
    summary: MonthSummary
    weeks: list[WeekGroup] = field(default_factory=list)
