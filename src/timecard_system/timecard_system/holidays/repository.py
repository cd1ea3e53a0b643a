from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def get_by_id(self, holiday_id: str) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, *, day: int, month: int, name: str, year: Optional[int] = None) -> Holiday:
        raise NotImplementedError

    def delete(self, *, holiday_id: str) -> bool:
        raise NotImplementedError
