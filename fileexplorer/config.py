"""Persistent JSON config helpers.

Stores the color preference and the default log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "fileexplorer"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write errors are logged and otherwise ignored; a preference that cannot
    be saved never ends a session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logging.getLogger(__name__).warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_no_color() -> bool:
    """Return persisted color-disable preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("no_color")
    return value if isinstance(value, bool) else False


def save_no_color(no_color: bool) -> None:
    config = load_config()
    config["no_color"] = bool(no_color)
    save_config(config)


def normalize_log_level(value: object) -> str | None:
    """Return an upper-case level name, or ``None`` for anything unrecognized."""
    if not isinstance(value, str):
        return None
    name = value.strip().upper()
    return name if name in LOG_LEVEL_NAMES else None


def load_log_level() -> str | None:
    """Return the persisted log level name when it is a valid level."""
    return normalize_log_level(load_config().get("log_level"))


def save_log_level(level: str | None) -> None:
    """Persist ``level``; ``None`` removes the key."""
    config = load_config()
    normalized = normalize_log_level(level)
    if normalized is None:
        config.pop("log_level", None)
    else:
        config["log_level"] = normalized
    save_config(config)
