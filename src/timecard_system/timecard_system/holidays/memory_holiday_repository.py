from __future__ import annotations

import itertools
from typing import Optional, Sequence

from .model import Holiday


class InMemoryHolidayRepository:
    """Process-local store for user holidays.

    Durable storage belongs to the persistence collaborator; it only has to
    satisfy HolidayRepository.
    """

    def __init__(self, holidays: Sequence[Holiday] = ()):
        self._ids = itertools.count(1)
        self._by_id: dict[str, Holiday] = {}
        for h in holidays:
            self.create(day=h.day, month=h.month, name=h.name, year=h.year)

    def list_all(self) -> Sequence[Holiday]:
        return list(self._by_id.values())

    def get_by_id(self, holiday_id: str) -> Optional[Holiday]:
        return self._by_id.get(holiday_id)

    def create(self, *, day: int, month: int, name: str, year: Optional[int] = None) -> Holiday:
        holiday_id = f"local-{next(self._ids)}"
        holiday = Holiday(day=day, month=month, name=name, year=year, holiday_id=holiday_id)
        self._by_id[holiday_id] = holiday
        return holiday

    def delete(self, *, holiday_id: str) -> bool:
        return self._by_id.pop(holiday_id, None) is not None
