import os


def _int_env(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "timecard-dev-secret"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Jornada padrão (Dom..Sáb)
    DEFAULT_SCHEDULE = {
        0: os.environ.get("SCHEDULE_SUN", "00:00"),
        1: os.environ.get("SCHEDULE_MON", "08:00"),
        2: os.environ.get("SCHEDULE_TUE", "08:00"),
        3: os.environ.get("SCHEDULE_WED", "08:00"),
        4: os.environ.get("SCHEDULE_THU", "08:00"),
        5: os.environ.get("SCHEDULE_FRI", "08:00"),
        6: os.environ.get("SCHEDULE_SAT", "00:00"),
    }

    # Overtime premiums shown on the summary
    PERCENT_NORMAL = _int_env("PERCENT_NORMAL", 50)
    PERCENT_SPECIAL = _int_env("PERCENT_SPECIAL", 100)

    # Punch cleaning thresholds (minutes)
    DUPLICATE_THRESHOLD_MINUTES = _int_env("DUPLICATE_THRESHOLD_MINUTES", 5)
    BREAK_MERGE_THRESHOLD_MINUTES = _int_env("BREAK_MERGE_THRESHOLD_MINUTES", 20)
    NOISE_THRESHOLD_MINUTES = _int_env("NOISE_THRESHOLD_MINUTES", 10)


DEFAULT_SCHEDULE = Config.DEFAULT_SCHEDULE
PERCENT_NORMAL = Config.PERCENT_NORMAL
PERCENT_SPECIAL = Config.PERCENT_SPECIAL
DUPLICATE_THRESHOLD_MINUTES = Config.DUPLICATE_THRESHOLD_MINUTES
BREAK_MERGE_THRESHOLD_MINUTES = Config.BREAK_MERGE_THRESHOLD_MINUTES
NOISE_THRESHOLD_MINUTES = Config.NOISE_THRESHOLD_MINUTES
