from src.timecard_system.timecard_system.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.timecard_system.timecard_system.punches.model import PunchPair


def test_standard_calculator_sums_complete_pairs():
    pairs = (PunchPair(entry=8 * 60, exit=12 * 60), PunchPair(entry=13 * 60, exit=17 * 60), PunchPair(entry=18 * 60))

    calc = StandardPayrollCalculator()
    assert calc.worked_minutes(pairs) == 8 * 60


def test_standard_calculator_ignores_inverted_pairs():
    calc = StandardPayrollCalculator()
    assert calc.worked_minutes((PunchPair(entry=600, exit=540),)) == 0


def test_balance_against_target():
    calc = StandardPayrollCalculator()

    assert calc.balance(420, 480, is_day_off=False) == -60
    assert calc.balance(540, 480, is_day_off=False) == 60
    assert calc.balance(0, 480, is_day_off=False) == -480


def test_balance_on_day_off_is_all_surplus():
    calc = StandardPayrollCalculator()
    assert calc.balance(240, 480, is_day_off=True) == 240
    assert calc.balance(0, 480, is_day_off=True) == 0
