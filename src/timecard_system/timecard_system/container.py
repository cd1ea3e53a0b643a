from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .core.constants import (
    DEFAULT_BREAK_MERGE_THRESHOLD_MINUTES,
    DEFAULT_DUPLICATE_THRESHOLD_MINUTES,
    DEFAULT_NOISE_THRESHOLD_MINUTES,
    DEFAULT_PERCENT_NORMAL,
    DEFAULT_PERCENT_SPECIAL,
    DEFAULT_SCHEDULE,
)
from .holidays.memory_holiday_repository import InMemoryHolidayRepository
from .holidays.service import HolidayService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .punches.model import NormalizationPolicy
from .timesheet.engine import WeeklyDsrEngine
from .timesheet.service import TimesheetService
from .timesheet.strategies.factory import OvertimeStrategyFactory


@dataclass(frozen=True)
class Container:
    policy: NormalizationPolicy

    holidays_repo: InMemoryHolidayRepository

    engine: WeeklyDsrEngine
    holiday_service: HolidayService
    timesheet_service: TimesheetService


def build_container(*, settings: Mapping[str, Any]) -> Container:
    policy = NormalizationPolicy(
        duplicate_threshold=int(settings.get("DUPLICATE_THRESHOLD_MINUTES", DEFAULT_DUPLICATE_THRESHOLD_MINUTES)),
        break_merge_threshold=int(settings.get("BREAK_MERGE_THRESHOLD_MINUTES", DEFAULT_BREAK_MERGE_THRESHOLD_MINUTES)),
        noise_threshold=int(settings.get("NOISE_THRESHOLD_MINUTES", DEFAULT_NOISE_THRESHOLD_MINUTES)),
    )

    holidays_repo = InMemoryHolidayRepository()

    engine = WeeklyDsrEngine(
        calculator=StandardPayrollCalculator(),
        strategy_factory=OvertimeStrategyFactory(),
        policy=policy,
        percent_normal=int(settings.get("PERCENT_NORMAL", DEFAULT_PERCENT_NORMAL)),
        percent_special=int(settings.get("PERCENT_SPECIAL", DEFAULT_PERCENT_SPECIAL)),
    )
    holiday_service = HolidayService(holidays_repo)
    timesheet_service = TimesheetService(
        engine=engine,
        policy=policy,
        default_schedule=settings.get("DEFAULT_SCHEDULE", DEFAULT_SCHEDULE),
    )

    return Container(
        policy=policy,
        holidays_repo=holidays_repo,
        engine=engine,
        holiday_service=holiday_service,
        timesheet_service=timesheet_service,
    )
