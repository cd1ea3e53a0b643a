import pytest

from src.timecard_system.timecard_system.core.enums import LaborWarning
from src.timecard_system.timecard_system.labor_warnings.detector import break_gaps, detect_labor_warnings
from src.timecard_system.timecard_system.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.timecard_system.timecard_system.punches.normalizer import normalize_punches


def _warnings(*punches):
    normalized = normalize_punches(list(punches))
    worked = StandardPayrollCalculator().worked_minutes(normalized.pairs)
    return detect_labor_warnings(normalized, worked)


@pytest.mark.parametrize(
    ("punches", "expected"),
    [
        (("08:00", "12:00", "13:00", "17:00"), []),
        (("08:00", "12:00", "13:00"), [LaborWarning.ODD_PUNCH_COUNT]),
        (("06:00", "19:00"), [LaborWarning.SHIFT_OVER_12H, LaborWarning.NO_LUNCH_BREAK]),
        (("08:00", "10:00", "13:00", "17:00"), [LaborWarning.LONG_BREAK]),
        (("08:00", "12:00", "12:30", "16:00"), [LaborWarning.NO_LUNCH_BREAK]),
    ],
)
def test_detect_labor_warnings(punches, expected):
    assert _warnings(*punches) == expected


def test_short_day_needs_no_lunch():
    assert _warnings("08:00", "14:00") == []


def test_break_gaps_between_pairs():
    normalized = normalize_punches(["08:00", "12:00", "13:00", "15:00", "15:30", "18:00"])
    assert break_gaps(normalized) == [60, 30]


def test_warning_messages_are_readable():
    assert LaborWarning.SHIFT_OVER_12H.message == "Jornada acima de 12h"
    assert all(w.message for w in LaborWarning)
