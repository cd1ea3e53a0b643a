"""Brazilian national holidays: fixed dates plus Easter-derived movable feasts.

User-defined holidays are merged at lookup time and win on a date collision.
"""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, date, timedelta
from functools import lru_cache
from typing import Iterable, Optional, Sequence

from .model import Holiday

FIXED_HOLIDAYS: tuple[tuple[int, int, str], ...] = (
    (1, 1, "Confraternização Universal"),
    (21, 4, "Tiradentes"),
    (1, 5, "Dia do Trabalho"),
    (7, 9, "Independência do Brasil"),
    (12, 10, "Nossa Senhora Aparecida"),
    (2, 11, "Finados"),
    (15, 11, "Proclamação da República"),
    (20, 11, "Dia da Consciência Negra"),
    (25, 12, "Natal"),
)

# Offsets in days relative to Easter Sunday
MOVABLE_FEASTS: tuple[tuple[int, str], ...] = (
    (-47, "Carnaval"),
    (-2, "Sexta-feira Santa"),
    (0, "Páscoa"),
    (60, "Corpus Christi"),
)


def easter_sunday(year: int) -> date:
    """Gregorian Easter (anonymous / Meeus-Jones-Butcher algorithm)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


@lru_cache(maxsize=64)
def _system_holidays(year: int) -> tuple[Holiday, ...]:
    holidays = [Holiday(day=d, month=m, name=name, year=year, is_system_defined=True) for d, m, name in FIXED_HOLIDAYS]

    easter = easter_sunday(year)
    for offset, name in MOVABLE_FEASTS:
        feast = easter + timedelta(days=offset)
        holidays.append(Holiday(day=feast.day, month=feast.month, name=name, year=year, is_system_defined=True))

    return tuple(holidays)


def _in_calendar_range(year: int) -> bool:
    return MINYEAR <= year <= MAXYEAR


def system_holidays_for_year(year: int) -> list[Holiday]:
    """National holidays of `year`; empty outside the representable calendar."""
    year = int(year)
    if not _in_calendar_range(year):
        return []
    return list(_system_holidays(year))


def resolve_holiday_name(
    day: int,
    month: int,
    year: int,
    custom_holidays: Iterable[Holiday] = (),
) -> Optional[str]:
    for holiday in custom_holidays:
        if holiday.matches(day, month, year):
            return holiday.name

    for holiday in system_holidays_for_year(year):
        if holiday.day == day and holiday.month == month:
            return holiday.name
    return None


def merged_holidays_for_year(year: int, custom_holidays: Iterable[Holiday] = ()) -> list[Holiday]:
    """Custom + system holidays for the management screen, by (month, day)."""
    custom = [h for h in custom_holidays if h.year is None or h.year == year]
    merged = custom + system_holidays_for_year(year)
    merged.sort(key=lambda h: (h.month, h.day))
    return merged


class HolidayCalendar:
    """Holiday lookups bound to one set of user-defined holidays."""

    def __init__(self, custom_holidays: Sequence[Holiday] = ()):
        self._custom = tuple(custom_holidays)

    def name_for(self, value: date) -> Optional[str]:
        return resolve_holiday_name(value.day, value.month, value.year, self._custom)
