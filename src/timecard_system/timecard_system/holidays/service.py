from __future__ import annotations

import logging

from ..common.validators import parse_day_month_text, require_non_empty
from ..core.exceptions import NotFoundError
from .calendar import merged_holidays_for_year, resolve_holiday_name
from .model import Holiday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def add(self, *, date_text: str, name: str) -> Holiday:
        name = require_non_empty(name, "Nome do feriado")
        day, month, year = parse_day_month_text(date_text)
        holiday = self._holidays.create(day=day, month=month, name=name, year=year)
        logger.info("custom holiday added: %02d/%02d%s %s", day, month, f"/{year}" if year else "", name)
        return holiday

    def delete(self, *, holiday_id: str) -> None:
        holiday = self._holidays.get_by_id(str(holiday_id))
        if holiday is None:
            raise NotFoundError("Feriado não encontrado")
        self._holidays.delete(holiday_id=holiday.holiday_id)
        logger.info("custom holiday removed: %s %s", holiday.holiday_id, holiday.name)

    def list_custom(self) -> list[Holiday]:
        return list(self._holidays.list_all())

    def list_for_year(self, year: int) -> list[Holiday]:
        return merged_holidays_for_year(int(year), self._holidays.list_all())

    def resolve(self, *, day: int, month: int, year: int):
        return resolve_holiday_name(int(day), int(month), int(year), self._holidays.list_all())

    @staticmethod
    def to_ui(holiday: Holiday) -> dict:
        date_text = f"{holiday.day:02d}/{holiday.month:02d}"
        if holiday.year and not holiday.is_system_defined:
            date_text += f"/{holiday.year}"
        return {
            "id": holiday.holiday_id,
            "day": holiday.day,
            "month": holiday.month,
            "year": holiday.year,
            "date": date_text,
            "name": holiday.name,
            "isSystem": holiday.is_system_defined,
        }
