import pytest

from src.timecard_system.timecard_system.punches.model import NormalizationPolicy, PunchPair
from src.timecard_system.timecard_system.punches.normalizer import (
    calculate_daily_minutes,
    drop_near_duplicates,
    merge_short_breaks,
    normalize_punches,
)


def test_inverted_stamps_are_sorted():
    day = normalize_punches(["10:00", "08:00"])
    assert day.columns[:2] == ("08:00", "10:00")
    assert day.pairs == (PunchPair(entry=480, exit=600),)


def test_coffee_break_is_merged_into_one_block():
    raw = ["08:00", "10:00", "10:15", "12:00"]
    day = normalize_punches(raw)

    assert day.columns == ("08:00", "12:00", "", "", "", "")
    assert calculate_daily_minutes(raw) == 240


def test_lunch_break_is_kept():
    day = normalize_punches(["08:00", "12:00", "13:00", "17:00"])
    assert day.columns[:4] == ("08:00", "12:00", "13:00", "17:00")
    assert calculate_daily_minutes(["08:00", "12:00", "13:00", "17:00"]) == 480


def test_repeated_read_of_same_stamp_is_collapsed():
    assert drop_near_duplicates([480, 482, 484, 720], 5) == [480, 720]
    assert calculate_daily_minutes(["08:00", "08:02", "12:00"]) == 240


def test_noise_block_is_removed_and_rest_of_day_survives():
    day = normalize_punches(["08:00", "12:00", "12:30", "12:38", "13:30", "17:00"])

    assert day.columns == ("08:00", "12:00", "13:30", "17:00", "", "")
    assert sum(p.duration for p in day.pairs) == 240 + 210


def test_unparseable_punches_are_dropped_silently():
    day = normalize_punches(["08:00", "[?]", "", "12:00", None])
    assert day.parsed_count == 2
    assert calculate_daily_minutes(["08:00", "[?]", "", "12:00"]) == 240


def test_odd_count_keeps_trailing_entry_without_exit():
    day = normalize_punches(["08:00", "12:00", "13:00"])
    assert day.columns[:3] == ("08:00", "12:00", "13:00")
    assert day.pairs[-1] == PunchPair(entry=780, exit=None)
    assert sum(p.duration for p in day.pairs) == 240


def test_stamps_beyond_three_pairs_are_dropped():
    raw = ["06:00", "07:00", "08:00", "09:00", "10:00", "11:00", "12:00", "13:00"]
    day = normalize_punches(raw)
    assert day.columns == ("06:00", "07:00", "08:00", "09:00", "10:00", "11:00")


def test_merge_repeats_until_no_short_gap_remains():
    assert merge_short_breaks([480, 600, 610, 700, 710, 800], 20) == [480, 800]


def test_policy_thresholds_are_configurable():
    strict = NormalizationPolicy(break_merge_threshold=10)
    day = normalize_punches(["08:00", "10:00", "10:15", "12:00"], strict)
    assert day.columns[:4] == ("08:00", "10:00", "10:15", "12:00")


def test_sorted_raw_keeps_ocr_values_for_training():
    day = normalize_punches(["12:00", "O8:00", ""])
    assert day.sorted_raw == ("12:00", "O8:00")


@pytest.mark.parametrize(
    "raw",
    [
        ["10:00", "08:00"],
        ["08:00", "10:00", "10:15", "12:00"],
        ["08:00", "12:00", "12:30", "12:38", "13:30", "17:00"],
        ["08:00", "08:03", "12:00", "13:00", "13:02", "17:00"],
        ["07:58", "12:01", "13:10", "18:00", "18:30", "22:00"],
        ["06:00", "07:00", "08:00", "09:00", "10:00", "11:00", "12:00", "13:00"],
        ["08:00", "12:00", "13:00"],
        ["[?]", "", "bad"],
    ],
)
def test_normalization_is_idempotent(raw):
    first = normalize_punches(raw)
    second = normalize_punches(first.columns)

    assert second.columns == first.columns
    assert second.pairs == first.pairs
