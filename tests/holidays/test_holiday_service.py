import pytest

from src.timecard_system.timecard_system.core.exceptions import NotFoundError, ValidationError
from src.timecard_system.timecard_system.holidays.memory_holiday_repository import InMemoryHolidayRepository
from src.timecard_system.timecard_system.holidays.service import HolidayService


def _service() -> HolidayService:
    return HolidayService(InMemoryHolidayRepository())


def test_add_recurring_and_dated_holidays():
    svc = _service()

    recurring = svc.add(date_text="20/01", name="São Sebastião")
    dated = svc.add(date_text="09/07/2025", name="Revolução Constitucionalista")

    assert recurring.year is None
    assert dated.year == 2025
    assert recurring.holiday_id != dated.holiday_id
    assert svc.resolve(day=20, month=1, year=2030) == "São Sebastião"
    assert svc.resolve(day=9, month=7, year=2025) == "Revolução Constitucionalista"


@pytest.mark.parametrize("text", ["2001", "32/01", "10/13", "aa/bb", ""])
def test_add_rejects_bad_dates(text):
    with pytest.raises(ValidationError):
        _service().add(date_text=text, name="Feriado")


def test_add_rejects_empty_name():
    with pytest.raises(ValidationError):
        _service().add(date_text="01/02", name="  ")


def test_delete():
    svc = _service()
    holiday = svc.add(date_text="20/01", name="São Sebastião")

    svc.delete(holiday_id=holiday.holiday_id)

    assert svc.list_custom() == []
    with pytest.raises(NotFoundError):
        svc.delete(holiday_id=holiday.holiday_id)


def test_list_for_year_merges_system_holidays():
    svc = _service()
    svc.add(date_text="20/01", name="São Sebastião")

    rows = [HolidayService.to_ui(h) for h in svc.list_for_year(2025)]

    assert rows[0] == {
        "id": None,
        "day": 1,
        "month": 1,
        "year": 2025,
        "date": "01/01",
        "name": "Confraternização Universal",
        "isSystem": True,
    }
    assert rows[1]["name"] == "São Sebastião"
    assert rows[1]["isSystem"] is False
    assert rows[1]["id"] is not None
