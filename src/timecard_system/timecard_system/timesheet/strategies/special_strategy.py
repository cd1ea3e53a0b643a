from __future__ import annotations

from .base import OvertimeDecision, OvertimeStrategy


class SpecialDayStrategy(OvertimeStrategy):
    """Holiday / rest Sunday: every worked minute is premium (100%) time."""

    def decide(self, *, worked: int, target: int) -> OvertimeDecision:
        return OvertimeDecision(special_minutes=worked, is_special_day=True)
