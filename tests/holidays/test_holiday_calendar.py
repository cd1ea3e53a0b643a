from datetime import date

import pytest

from src.timecard_system.timecard_system.holidays.calendar import (
    HolidayCalendar,
    easter_sunday,
    merged_holidays_for_year,
    resolve_holiday_name,
    system_holidays_for_year,
)
from src.timecard_system.timecard_system.holidays.model import Holiday


@pytest.mark.parametrize(
    "year, expected",
    [
        (2019, date(2019, 4, 21)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2026, date(2026, 4, 5)),
        (2000, date(2000, 4, 23)),
    ],
)
def test_easter_sunday(year, expected):
    assert easter_sunday(year) == expected


def test_movable_feasts_follow_easter():
    assert resolve_holiday_name(4, 3, 2025) == "Carnaval"
    assert resolve_holiday_name(18, 4, 2025) == "Sexta-feira Santa"
    assert resolve_holiday_name(20, 4, 2025) == "Páscoa"
    assert resolve_holiday_name(19, 6, 2025) == "Corpus Christi"


def test_fixed_holidays_and_ordinary_days():
    assert resolve_holiday_name(25, 12, 2025) == "Natal"
    assert resolve_holiday_name(21, 4, 2030) == "Tiradentes"
    assert resolve_holiday_name(2, 6, 2025) is None


def test_system_table_for_year():
    holidays = system_holidays_for_year(2025)

    assert len(holidays) == 13
    assert all(h.is_system_defined and h.year == 2025 for h in holidays)


def test_custom_holiday_wins_on_collision():
    custom = [Holiday(day=25, month=12, name="Natal da Empresa")]
    assert resolve_holiday_name(25, 12, 2025, custom) == "Natal da Empresa"


def test_custom_holiday_with_year_only_matches_that_year():
    custom = [Holiday(day=20, month=1, name="São Sebastião", year=2024)]

    assert resolve_holiday_name(20, 1, 2024, custom) == "São Sebastião"
    assert resolve_holiday_name(20, 1, 2025, custom) is None


def test_recurring_custom_holiday_matches_every_year():
    custom = [Holiday(day=20, month=1, name="São Sebastião")]

    assert resolve_holiday_name(20, 1, 2024, custom) == "São Sebastião"
    assert resolve_holiday_name(20, 1, 2031, custom) == "São Sebastião"


def test_merged_list_is_sorted_and_filters_other_years():
    custom = [
        Holiday(day=20, month=1, name="São Sebastião"),
        Holiday(day=9, month=7, name="Revolução", year=2024),
    ]
    merged = merged_holidays_for_year(2025, custom)

    assert merged[0].name == "Confraternização Universal"
    assert merged[1].name == "São Sebastião"
    assert "Revolução" not in [h.name for h in merged]
    assert [(h.month, h.day) for h in merged] == sorted((h.month, h.day) for h in merged)


def test_calendar_binds_custom_holidays():
    calendar = HolidayCalendar([Holiday(day=2, month=6, name="Aniversário da Cidade")])

    assert calendar.name_for(date(2025, 6, 2)) == "Aniversário da Cidade"
    assert calendar.name_for(date(2025, 6, 19)) == "Corpus Christi"
    assert calendar.name_for(date(2025, 6, 3)) is None


@pytest.mark.parametrize("year", [0, -5, 10000])
def test_years_outside_the_calendar_have_no_system_holidays(year):
    assert system_holidays_for_year(year) == []
    assert resolve_holiday_name(1, 1, year) is None
    assert merged_holidays_for_year(year) == []


def test_custom_holiday_still_resolves_outside_the_calendar():
    assert resolve_holiday_name(1, 1, 0, [Holiday(day=1, month=1, name="Ano Zero")]) == "Ano Zero"
