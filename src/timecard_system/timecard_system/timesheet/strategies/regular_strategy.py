from __future__ import annotations

from .base import OvertimeDecision, OvertimeStrategy


class RegularDayStrategy(OvertimeStrategy):
    """Ordinary day: only the time beyond the target is (normal) overtime."""

    def decide(self, *, worked: int, target: int) -> OvertimeDecision:
        return OvertimeDecision(normal_minutes=max(0, worked - target))
