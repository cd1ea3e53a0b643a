from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    """Feriado. `year=None` means the holiday recurs every year."""

    day: int
    month: int
    name: str
    year: Optional[int] = None
    is_system_defined: bool = False
    holiday_id: Optional[str] = None

    def matches(self, day: int, month: int, year: int) -> bool:
        return self.day == day and self.month == month and (self.year is None or self.year == year)
