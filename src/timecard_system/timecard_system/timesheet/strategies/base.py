from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OvertimeDecision:
    normal_minutes: int = 0
    special_minutes: int = 0
    is_special_day: bool = False


class OvertimeStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's extra time is classified."""

    @abstractmethod
    def decide(self, *, worked: int, target: int) -> OvertimeDecision:
        raise NotImplementedError
