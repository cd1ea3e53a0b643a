"""Example: drive the service layer directly (no Flask).

Controllers stay thin; ingestion and the monthly calculation live in the services.
"""

import importlib

from config import get_settings_module

from src.timecard_system.timecard_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings={"DEFAULT_SCHEDULE": settings.DEFAULT_SCHEDULE})
    service = container.timesheet_service

    days = service.ingest(
        [
            {"day": "01", "dayLabel": "DOM", "timestamps": ["08:00", "12:00"]},
            {"day": "02", "dayLabel": "SEG", "timestamps": []},
            {"day": "03", "dayLabel": "TER", "timestamps": ["07:58", "12:01", "12:03", "13:00", "18:10"]},
        ]
    )
    result = service.recompute(days, year=2025, month=6)
    print(service.to_ui(result))


if __name__ == "__main__":
    main()
