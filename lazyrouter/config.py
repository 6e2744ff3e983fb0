"""Persistent JSON config helpers.

Stores theme choice, branch-row display flags and main-branch names.
Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyrouter"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_MAIN_BRANCHES: tuple[str, ...] = ("master", "main")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class UserConfig:
    """Session-wide settings resolved once at startup."""

    theme: str | None = None
    show_remote_tracker: bool = False
    full_description: bool = False
    main_branches: tuple[str, ...] = DEFAULT_MAIN_BRANCHES
    log_level: str = "WARNING"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_bool(data: dict[str, object], key: str) -> bool:
    """Only explicit booleans count; anything else reads as ``False``."""
    value = data.get(key)
    return value if isinstance(value, bool) else False


def _save_value(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    _save_value("theme", stripped)


def load_show_remote_tracker() -> bool:
    return _load_bool(load_config(), "show_remote_tracker")


def save_show_remote_tracker(enabled: bool) -> None:
    _save_value("show_remote_tracker", bool(enabled))


def load_full_description() -> bool:
    return _load_bool(load_config(), "full_description")


def save_full_description(enabled: bool) -> None:
    _save_value("full_description", bool(enabled))


def _coerce_main_branches(value: object) -> tuple[str, ...]:
    """Keep non-empty string entries; fall back to defaults when none remain."""
    if not isinstance(value, list):
        return DEFAULT_MAIN_BRANCHES
    names = tuple(item.strip() for item in value if isinstance(item, str) and item.strip())
    return names or DEFAULT_MAIN_BRANCHES


def _coerce_log_level(value: object) -> str:
    if not isinstance(value, str):
        return "WARNING"
    candidate = value.strip().upper()
    return candidate if candidate in LOG_LEVELS else "WARNING"


def load_user_config() -> UserConfig:
    """Read the config file once and assemble a sanitized ``UserConfig``."""
    data = load_config()
    theme = data.get("theme")
    return UserConfig(
        theme=(theme.strip() or None) if isinstance(theme, str) else None,
        show_remote_tracker=_load_bool(data, "show_remote_tracker"),
        full_description=_load_bool(data, "full_description"),
        main_branches=_coerce_main_branches(data.get("main_branches")),
        log_level=_coerce_log_level(data.get("log_level")),
    )
