import pytest

from src.timecard_system.timecard_system.common.time_utils import minutes_to_time, time_to_minutes, week_of_year, weekday_index
from datetime import date


def test_round_trip_plain_time():
    assert minutes_to_time(time_to_minutes("08:00")) == "08:00"


@pytest.mark.parametrize("raw", ["[?]", "?", "08:[0]", "", None, "   ", "abc", "--"])
def test_unreadable_values_are_absent(raw):
    assert time_to_minutes(raw) is None


def test_ocr_letter_confusions_resolve_to_digits():
    assert time_to_minutes("O8:SO") == time_to_minutes("08:50") == 530
    assert time_to_minutes("I0:00") == 600
    assert time_to_minutes("l7:3O") == 17 * 60 + 30
    assert time_to_minutes("1b:0g") == 18 * 60 + 9


@pytest.mark.parametrize("raw", ["08:00", "8:00", "0800", "800", "08.00", "8h00", "08 00", "08::00", " 08:00 "])
def test_separator_and_missing_colon_variants(raw):
    assert time_to_minutes(raw) == 480


def test_out_of_range_values_are_rejected():
    assert time_to_minutes("25:00") is None
    assert time_to_minutes("08:60") is None
    assert time_to_minutes("12345") is None


def test_midnight_and_end_of_day():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("24:00") == 24 * 60


def test_trailing_garbage_after_digits_is_tolerated():
    assert time_to_minutes("08:00:00") == 480
    assert time_to_minutes("08:00am") == 480


def test_minutes_to_time_formats_negative_balances():
    assert minutes_to_time(0) == "00:00"
    assert minutes_to_time(-30) == "-00:30"
    assert minutes_to_time(605) == "10:05"
    assert minutes_to_time(-(25 * 60 + 1)) == "-25:01"


def test_weekday_index_starts_on_sunday():
    assert weekday_index(date(2025, 6, 1)) == 0
    assert weekday_index(date(2025, 6, 7)) == 6


def test_weeks_start_on_sunday():
    assert week_of_year(date(2025, 1, 1)) == 1
    assert week_of_year(date(2025, 1, 4)) == 1
    assert week_of_year(date(2025, 1, 5)) == 2
    assert week_of_year(date(2025, 6, 1)) == week_of_year(date(2025, 6, 7))
    assert week_of_year(date(2025, 6, 8)) == week_of_year(date(2025, 6, 7)) + 1
