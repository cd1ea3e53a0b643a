from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...punches.model import PunchPair


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for daily accounting)."""

    @abstractmethod
    def worked_minutes(self, pairs: Sequence[PunchPair]) -> int:
        raise NotImplementedError

    @abstractmethod
    def balance(self, worked: int, target: int, *, is_day_off: bool) -> int:
        raise NotImplementedError
