"""Weekly paid rest (DSR) engine.

Every pass is a pure function over short-lived records:

1. classify      DayRecord      -> ClassifiedDay
2. compensate    ClassifiedDay  -> RestStatus   (worked Sunday converts a weekday fault)
3. overrides     RestStatus     -> RestStatus   (forced DSR clears faults)
4. settle        ClassifiedDay + RestStatus -> DayResult (overtime / deficit)
5. DSR losses    WeekGroup      -> lost rest days

The whole month is recomputed on every edit; there is no partial update path.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Optional, Sequence

from ..common.time_utils import safe_date, week_of_year, weekday_index
from ..core.constants import DAY_OFF_LABELS, DEFAULT_PERCENT_NORMAL, DEFAULT_PERCENT_SPECIAL
from ..holidays.calendar import HolidayCalendar
from ..labor_warnings.detector import detect_labor_warnings
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from ..punches.model import DayRecord, NormalizationPolicy
from ..punches.normalizer import DEFAULT_POLICY, normalize_punches
from ..schedules.model import WeeklySchedule
from .model import ClassifiedDay, DayResult, MonthSummary, RestStatus, TimesheetResult, WeekGroup
from .strategies.factory import OvertimeStrategyFactory

logger = logging.getLogger(__name__)


def classify_day(
    record: DayRecord,
    *,
    year: int,
    month: int,
    schedule: WeeklySchedule,
    calendar: HolidayCalendar,
    policy: NormalizationPolicy = DEFAULT_POLICY,
    calculator: Optional[PayrollCalculator] = None,
) -> ClassifiedDay:
    calculator = calculator or StandardPayrollCalculator()
    normalized = normalize_punches(record.raw_punches, policy)
    worked = calculator.worked_minutes(normalized.pairs)

    # Impossible dates (31/02) stay unclassified: no weekday, no target, no week.
    work_date = safe_date(year, month, record.calendar_day)
    weekday = weekday_index(work_date) if work_date else None
    week_number = week_of_year(work_date) if work_date else None
    holiday_name = calendar.name_for(work_date) if work_date else None
    target = schedule.target_for(weekday)

    is_day_off_label = record.label_contains(DAY_OFF_LABELS)
    is_candidate_fault = (
        target > 0
        and worked == 0
        and holiday_name is None
        and not record.is_aboned
        and not is_day_off_label
    )

    return ClassifiedDay(
        record=record,
        work_date=work_date,
        weekday=weekday,
        week_number=week_number,
        holiday_name=holiday_name,
        normalized=normalized,
        worked=worked,
        target=target,
        is_day_off_label=is_day_off_label,
        is_candidate_fault=is_candidate_fault,
    )


def _indices_by_week(days: Sequence[ClassifiedDay]) -> dict[int, list[int]]:
    weeks: dict[int, list[int]] = defaultdict(list)
    order = sorted(range(len(days)), key=lambda i: days[i].record.calendar_day)
    for i in order:
        if days[i].week_number is not None:
            weeks[days[i].week_number].append(i)
    return weeks


def compensate_worked_sundays(days: Sequence[ClassifiedDay]) -> list[RestStatus]:
    """A worked Sunday turns the week's first weekday fault into compensatory rest.

    With no fault left to convert, the Sunday itself is flagged as worked
    without rest. Fires at most once per week.
    """
    statuses = [RestStatus(is_fault=d.is_candidate_fault) for d in days]

    for week_number, members in _indices_by_week(days).items():
        sunday = next((i for i in members if days[i].is_sunday and days[i].worked > 0), None)
        if sunday is None:
            continue

        candidate = next((i for i in members if not days[i].is_sunday and days[i].is_candidate_fault), None)
        if candidate is None:
            logger.debug("week %s: Sunday %s worked without rest", week_number, days[sunday].record.calendar_day)
            statuses[sunday] = RestStatus(is_fault=statuses[sunday].is_fault, is_sunday_worked_without_rest=True)
        elif days[candidate].record.manually_disabled_dsr:
            logger.debug("week %s: compensation refused on day %s", week_number, days[candidate].record.calendar_day)
        else:
            logger.debug("week %s: day %s becomes compensatory rest", week_number, days[candidate].record.calendar_day)
            statuses[candidate] = RestStatus(is_fault=False, is_compensatory_rest=True)

    return statuses


def apply_dsr_overrides(days: Sequence[ClassifiedDay], statuses: Sequence[RestStatus]) -> list[RestStatus]:
    out = []
    for day, status in zip(days, statuses):
        if day.record.force_dsr and status.is_fault:
            status = RestStatus(
                is_fault=False,
                is_compensatory_rest=status.is_compensatory_rest,
                is_sunday_worked_without_rest=status.is_sunday_worked_without_rest,
            )
        out.append(status)
    return out


def group_weeks(days: Sequence[ClassifiedDay], statuses: Sequence[RestStatus]) -> list[WeekGroup]:
    groups = []
    for week_number, members in sorted(_indices_by_week(days).items()):
        holidays = [days[i] for i in members if days[i].is_holiday]
        groups.append(
            WeekGroup(
                week_number=week_number,
                member_days=tuple(days[i].record.calendar_day for i in members),
                has_holiday=bool(holidays),
                holiday_falls_on_sunday=any(d.is_sunday for d in holidays),
                has_unresolved_fault=any(statuses[i].is_fault for i in members),
            )
        )
    return groups


class WeeklyDsrEngine:
    def __init__(
        self,
        *,
        calculator: Optional[PayrollCalculator] = None,
        strategy_factory: Optional[OvertimeStrategyFactory] = None,
        policy: NormalizationPolicy = DEFAULT_POLICY,
        percent_normal: int = DEFAULT_PERCENT_NORMAL,
        percent_special: int = DEFAULT_PERCENT_SPECIAL,
    ):
        self._calculator = calculator or StandardPayrollCalculator()
        self._factory = strategy_factory or OvertimeStrategyFactory()
        self._policy = policy
        self._percent_normal = int(percent_normal)
        self._percent_special = int(percent_special)

    def run(
        self,
        days: Iterable[DayRecord],
        *,
        schedule: WeeklySchedule,
        year: int,
        month: int,
        calendar: Optional[HolidayCalendar] = None,
    ) -> TimesheetResult:
        calendar = calendar or HolidayCalendar()
        classified = [
            classify_day(
                record,
                year=year,
                month=month,
                schedule=schedule,
                calendar=calendar,
                policy=self._policy,
                calculator=self._calculator,
            )
            for record in days
        ]

        statuses = apply_dsr_overrides(classified, compensate_worked_sundays(classified))
        weeks = group_weeks(classified, statuses)
        results = [self._settle(day, status) for day, status in zip(classified, statuses)]

        return TimesheetResult(days=results, summary=self._summarize(results, weeks), weeks=weeks)

    def _settle(self, day: ClassifiedDay, status: RestStatus) -> DayResult:
        record = day.record
        strategy = self._factory.for_day(
            sunday_mode=record.sunday_mode,
            is_holiday=day.is_holiday,
            is_sunday=day.is_sunday,
            target=day.target,
            is_sunday_worked_without_rest=status.is_sunday_worked_without_rest,
        )
        decision = strategy.decide(worked=day.worked, target=day.target)

        is_day_off = day.is_holiday or day.is_day_off_label or record.force_dsr
        deficit = 0
        if not (status.is_fault or is_day_off or status.is_compensatory_rest):
            deficit = max(0, day.target - day.worked)

        balance = self._calculator.balance(
            day.worked,
            day.target,
            is_day_off=is_day_off or record.is_aboned or status.is_compensatory_rest,
        )
        is_waived_absence = (
            record.is_aboned and day.target > 0 and day.worked == 0 and not day.is_holiday and not day.is_day_off_label
        )

        return DayResult(
            calendar_day=record.calendar_day,
            weekday=day.weekday,
            week_number=day.week_number,
            holiday_name=day.holiday_name,
            columns=day.normalized.columns,
            total_worked_minutes=day.worked,
            target_minutes=day.target,
            balance_minutes=balance,
            is_falta=status.is_fault,
            is_waived_absence=is_waived_absence,
            is_compensatory_rest=status.is_compensatory_rest,
            is_sunday_worked_without_rest=status.is_sunday_worked_without_rest,
            is_special_day=decision.is_special_day,
            normal_overtime_minutes=decision.normal_minutes,
            special_overtime_minutes=decision.special_minutes,
            deficit_minutes=deficit,
            is_aboned=record.is_aboned,
            warnings=tuple(detect_labor_warnings(day.normalized, day.worked)),
        )

    def _summarize(self, results: Sequence[DayResult], weeks: Sequence[WeekGroup]) -> MonthSummary:
        counted = [r for r in results if not r.is_aboned]
        return MonthSummary(
            total_normal_overtime=sum(r.normal_overtime_minutes for r in counted),
            total_special_overtime=sum(r.special_overtime_minutes for r in counted),
            total_deficit_minutes=sum(r.deficit_minutes for r in counted),
            total_absence_days=sum(1 for r in counted if r.is_falta),
            total_dsr_lost=sum(w.dsr_lost for w in weeks),
            percent_normal=self._percent_normal,
            percent_special=self._percent_special,
        )
