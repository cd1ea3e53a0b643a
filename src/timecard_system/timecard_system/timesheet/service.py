from __future__ import annotations

import dataclasses
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.time_utils import minutes_to_time
from ..common.validators import sanitize_time_input
from ..core.constants import DAYS_OF_WEEK, PUNCH_COLUMNS
from ..core.enums import DsrOverride, SundayMode
from ..core.exceptions import ValidationError
from ..holidays.calendar import HolidayCalendar
from ..holidays.model import Holiday
from ..punches.ingestion import ingest_ocr_rows, parse_day_number
from ..punches.model import DayRecord, NormalizationPolicy
from ..punches.normalizer import DEFAULT_POLICY
from ..schedules.model import WeeklySchedule
from .engine import WeeklyDsrEngine
from .model import DayResult, MonthSummary, TimesheetResult


def day_record_from_payload(data: Mapping[str, Any]) -> DayRecord:
    """Decode the camelCase day payload used by the editor."""
    day = parse_day_number(data.get("day"))
    if day is None:
        raise ValidationError("Dia inválido")

    if any(column in data for column in PUNCH_COLUMNS):
        raw = tuple(str(data.get(column) or "") for column in PUNCH_COLUMNS)
    else:
        raw = tuple(str(v) for v in (data.get("punches") or ()) if v is not None)

    try:
        sunday_mode = SundayMode(data.get("sundayMode") or SundayMode.AUTO.value)
    except ValueError:
        raise ValidationError("sundayMode inválido") from None

    if data.get("dsrOverride"):
        try:
            dsr_override = DsrOverride(data["dsrOverride"])
        except ValueError:
            raise ValidationError("dsrOverride inválido") from None
    elif data.get("forceDsr"):
        dsr_override = DsrOverride.FORCED
    elif data.get("manuallyDisabledDsr"):
        dsr_override = DsrOverride.DISABLED
    else:
        dsr_override = DsrOverride.NONE

    return DayRecord(
        calendar_day=day,
        raw_punches=raw,
        day_label=data.get("dayLabel") or None,
        original_punches=tuple(data.get("originalPunches") or ()),
        is_explicit_weekend=bool(data.get("isWeekend")),
        is_aboned=bool(data.get("isAboned")),
        sunday_mode=sunday_mode,
        dsr_override=dsr_override,
    )


def day_record_to_payload(record: DayRecord) -> dict:
    payload = {"day": str(record.calendar_day).zfill(2), "dayLabel": record.day_label or ""}
    padded = list(record.raw_punches[: len(PUNCH_COLUMNS)])
    padded += [""] * (len(PUNCH_COLUMNS) - len(padded))
    payload.update(zip(PUNCH_COLUMNS, padded))
    payload.update(
        {
            "originalPunches": list(record.original_punches),
            "isWeekend": record.is_explicit_weekend,
            "isAboned": record.is_aboned,
            "sundayMode": record.sunday_mode.value,
            "dsrOverride": record.dsr_override.value,
            "forceDsr": record.force_dsr,
            "manuallyDisabledDsr": record.manually_disabled_dsr,
        }
    )
    return payload


def holiday_from_payload(data: Mapping[str, Any]) -> Holiday:
    try:
        day = int(data["day"])
        month = int(data["month"])
        year = int(data["year"]) if data.get("year") not in (None, "") else None
    except (KeyError, TypeError, ValueError):
        raise ValidationError("Feriado inválido") from None
    return Holiday(day=day, month=month, year=year, name=str(data.get("name") or ""), holiday_id=data.get("id"))


class TimesheetService:
    def __init__(
        self,
        *,
        engine: Optional[WeeklyDsrEngine] = None,
        policy: NormalizationPolicy = DEFAULT_POLICY,
        default_schedule: Optional[Mapping[int, Any]] = None,
    ):
        self._engine = engine or WeeklyDsrEngine(policy=policy)
        self._policy = policy
        self._default_schedule = default_schedule

    def ingest(self, rows: Iterable[Mapping[str, Any]]) -> list[DayRecord]:
        return ingest_ocr_rows(rows, self._policy)

    def build_schedule(self, values: Optional[Mapping[Any, Any]] = None) -> WeeklySchedule:
        if self._default_schedule is None:
            return WeeklySchedule.from_mapping(values)
        return WeeklySchedule.from_mapping(values, default=self._default_schedule)

    def recompute(
        self,
        days: Sequence[DayRecord],
        *,
        year: int,
        month: int,
        schedule: Optional[WeeklySchedule] = None,
        custom_holidays: Sequence[Holiday] = (),
    ) -> TimesheetResult:
        """Full recomputation; every derived field is rebuilt from scratch."""
        return self._engine.run(
            days,
            schedule=schedule or self.build_schedule(),
            year=int(year),
            month=int(month),
            calendar=HolidayCalendar(custom_holidays),
        )

    # --- user edits (each returns a new record) ---

    def toggle_abono(self, record: DayRecord) -> DayRecord:
        return dataclasses.replace(record, is_aboned=not record.is_aboned)

    def cycle_sunday_mode(self, record: DayRecord) -> DayRecord:
        return dataclasses.replace(record, sunday_mode=record.sunday_mode.cycle())

    def cycle_dsr(self, record: DayRecord, *, is_compensatory_rest: bool = False) -> DayRecord:
        return dataclasses.replace(
            record,
            dsr_override=record.dsr_override.cycle(is_compensatory_rest=is_compensatory_rest),
        )

    def set_punch(self, record: DayRecord, column: str, value: Optional[str]) -> DayRecord:
        if column not in PUNCH_COLUMNS:
            raise ValidationError(f"Coluna inválida: {column}")
        punches = list(record.raw_punches[: len(PUNCH_COLUMNS)])
        punches += [""] * (len(PUNCH_COLUMNS) - len(punches))
        punches[PUNCH_COLUMNS.index(column)] = sanitize_time_input(value)
        return dataclasses.replace(record, raw_punches=tuple(punches))

    # --- presentation ---

    def to_ui(self, result: TimesheetResult) -> dict:
        return {
            "days": [self._day_to_ui(d) for d in result.days],
            "summary": self.summary_to_ui(result.summary),
        }

    def _day_to_ui(self, d: DayResult) -> dict:
        row = {
            "day": str(d.calendar_day).zfill(2),
            "dayOfWeek": DAYS_OF_WEEK[d.weekday] if d.weekday is not None else "",
            "weekNumber": d.week_number,
            "holidayName": d.holiday_name,
            "totalWorked": minutes_to_time(d.total_worked_minutes),
            "balance": minutes_to_time(d.balance_minutes),
            "targetMinutes": d.target_minutes,
            "normalOvertimeMinutes": d.normal_overtime_minutes,
            "specialOvertimeMinutes": d.special_overtime_minutes,
            "deficitMinutes": d.deficit_minutes,
            "isFalta": d.is_falta,
            "isWaivedAbsence": d.is_waived_absence,
            "isCompensatoryRest": d.is_compensatory_rest,
            "isSundayWorkedWithoutRest": d.is_sunday_worked_without_rest,
            "isSpecialDay": d.is_special_day,
            "isAboned": d.is_aboned,
            "warnings": [w.value for w in d.warnings],
            "warningMessages": [w.message for w in d.warnings],
        }
        row.update(zip(PUNCH_COLUMNS, d.columns))
        return row

    @staticmethod
    def summary_to_ui(summary: MonthSummary) -> dict:
        return {
            "totalExtrasNormal": minutes_to_time(summary.total_normal_overtime),
            "totalExtrasSpecial": minutes_to_time(summary.total_special_overtime),
            "totalDeficit": minutes_to_time(summary.total_deficit_minutes),
            "totalExtrasNormalMinutes": summary.total_normal_overtime,
            "totalExtrasSpecialMinutes": summary.total_special_overtime,
            "totalDeficitMinutes": summary.total_deficit_minutes,
            "totalFaltasDays": summary.total_absence_days,
            "totalDsrDescontado": summary.total_dsr_lost,
            "percentNormal": summary.percent_normal,
            "percentSpecial": summary.percent_special,
        }
