"""JSON-based settings persistence for the range calendar."""

import json
import logging
import os
from datetime import date

from calendar_logic import DateRange

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".range-calendar-settings.json")

_DEFAULTS = {
    "week_starts_on": 0,
    "date_format": "%d/%m/%Y",
    "log_level": "WARNING",
    "last_range": None,
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_settings(path: str = _SETTINGS_PATH) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", path, e)
        return settings
    if not isinstance(stored, dict):
        return settings

    wso = stored.get("week_starts_on")
    if isinstance(wso, int) and not isinstance(wso, bool) and 0 <= wso <= 6:
        settings["week_starts_on"] = wso
    if isinstance(stored.get("date_format"), str) and stored["date_format"]:
        settings["date_format"] = stored["date_format"]
    level = stored.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        settings["log_level"] = level.upper()
    if "last_range" in stored:
        settings["last_range"] = stored["last_range"]
    return settings


def save_settings(settings: dict, path: str = _SETTINGS_PATH) -> None:
    """Persist settings to disk."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


# ------------------------------------------------------------------
# last_range <-> DateRange
# ------------------------------------------------------------------
def range_to_setting(r: DateRange) -> list[str | None]:
    return [d.isoformat() if d else None for d in r.as_tuple()]


def range_from_setting(value) -> DateRange | None:
    """Parse a stored ``last_range``; None if absent or malformed."""
    if not isinstance(value, list) or len(value) != 2:
        return None
    try:
        start, end = (date.fromisoformat(v) if v else None for v in value)
        return DateRange(start, end)
    except (TypeError, ValueError):
        logger.warning("ignoring malformed last_range %r", value)
        return None
