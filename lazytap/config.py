"""Persistent JSON config helpers.

Stores the UI theme, external program commands, and log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .logging_config import get_logger

APP_NAME = "lazytap"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = get_logger("config")


@dataclass(frozen=True)
class Settings:
    """Validated view of the persisted config."""

    theme: str | None = None
    player_command: str | None = None
    file_manager_command: str | None = None
    log_level: str = "WARNING"


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

    Filesystem errors are logged and otherwise ignored; an unwritable config
    never stops the player.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not save config to %s: %s", CONFIG_PATH, exc)


def _optional_string(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_settings() -> Settings:
    """Read config and drop values of the wrong type."""
    data = load_config()
    log_level = _optional_string(data.get("log_level"))
    if log_level is None or log_level.upper() not in LOG_LEVELS:
        log_level = "WARNING"
    return Settings(
        theme=_optional_string(data.get("theme")),
        player_command=_optional_string(data.get("player_command")),
        file_manager_command=_optional_string(data.get("file_manager_command")),
        log_level=log_level.upper(),
    )


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)
