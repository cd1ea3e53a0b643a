from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import SundayMode
from .base import OvertimeStrategy
from .regular_strategy import RegularDayStrategy
from .special_strategy import SpecialDayStrategy


@dataclass
class OvertimeStrategyFactory:
    """Factory Pattern: choose the overtime strategy from the day's rules."""

    def for_day(
        self,
        *,
        sunday_mode: SundayMode,
        is_holiday: bool,
        is_sunday: bool,
        target: int,
        is_sunday_worked_without_rest: bool,
    ) -> OvertimeStrategy:
        if sunday_mode is SundayMode.FORCE_OFF:
            return RegularDayStrategy()
        if sunday_mode is SundayMode.FORCE_EXTRA:
            return SpecialDayStrategy()

        if is_holiday or (is_sunday and target == 0) or is_sunday_worked_without_rest:
            return SpecialDayStrategy()
        return RegularDayStrategy()
