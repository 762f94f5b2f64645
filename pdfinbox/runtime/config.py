"""Persistent JSON config helpers.

Stores inbox directories, key-binding overrides, theme, and tick rate.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..input.key_config import KeyConfig

logger = logging.getLogger(__name__)

APP_NAME = "pdfinbox"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_MANAGED_DIR = Path.home() / "paper"
DEFAULT_UNMANAGED_DIR = Path.home() / "Downloads"
DEFAULT_TICK_MS = 200
MIN_TICK_MS = 20
MAX_TICK_MS = 5000


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks the session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _load_directory(key: str, default: Path) -> Path:
    value = load_config().get(key)
    if not isinstance(value, str) or not value.strip():
        return default
    return Path(value.strip()).expanduser()


def load_managed_dir() -> Path:
    """Directory holding already-triaged PDFs."""
    return _load_directory("managed_dir", DEFAULT_MANAGED_DIR)


def load_unmanaged_dir() -> Path:
    """Directory PDFs are triaged from."""
    return _load_directory("unmanaged_dir", DEFAULT_UNMANAGED_DIR)


def save_directories(managed_dir: Path, unmanaged_dir: Path) -> None:
    config = load_config()
    config["managed_dir"] = str(managed_dir)
    config["unmanaged_dir"] = str(unmanaged_dir)
    save_config(config)


def load_key_config() -> KeyConfig:
    """Default bindings with any valid ``key_bindings`` overrides applied."""
    value = load_config().get("key_bindings")
    if not isinstance(value, dict):
        return KeyConfig()
    return KeyConfig().with_overrides(value)


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
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def coerce_tick_ms(value: object) -> int:
    """Clamp a tick interval into the supported range.

    Booleans and non-integers fall back to the default.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_TICK_MS
    return max(MIN_TICK_MS, min(MAX_TICK_MS, value))


def load_tick_ms() -> int:
    return coerce_tick_ms(load_config().get("tick_ms", DEFAULT_TICK_MS))


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_MANAGED_DIR",
    "DEFAULT_TICK_MS",
    "DEFAULT_UNMANAGED_DIR",
    "coerce_tick_ms",
    "load_config",
    "load_key_config",
    "load_managed_dir",
    "load_theme_name",
    "load_tick_ms",
    "load_unmanaged_dir",
    "save_config",
    "save_directories",
    "save_theme_name",
]
