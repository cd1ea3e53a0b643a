from __future__ import annotations

from typing import Sequence

from .base import PayrollCalculator
from ...punches.model import PunchPair


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: sum of (exit - entry) over complete pairs.

    On a day off any work is surplus; otherwise the balance is worked - target.
    """

    def worked_minutes(self, pairs: Sequence[PunchPair]) -> int:
        return sum(pair.duration for pair in pairs)

    def balance(self, worked: int, target: int, *, is_day_off: bool) -> int:
        if is_day_off:
            return worked
        return worked - target
