from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .holidays.controller import register as register_holidays
from .timesheet.controller import register as register_timesheet

logger = logging.getLogger(__name__)

_SETTING_NAMES = (
    "DEFAULT_SCHEDULE",
    "PERCENT_NORMAL",
    "PERCENT_SPECIAL",
    "DUPLICATE_THRESHOLD_MINUTES",
    "BREAK_MERGE_THRESHOLD_MINUTES",
    "NOISE_THRESHOLD_MINUTES",
)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    engine_settings = {name: getattr(settings, name) for name in _SETTING_NAMES if hasattr(settings, name)}
    logger.info("[timecard-system] settings=%s engine=%s", settings_module, engine_settings)

    container = build_container(settings=engine_settings)

    register_timesheet(app, container)
    register_holidays(app, container)

    return app
