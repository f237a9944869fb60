"""Persistent settings and theme directories for scopetint."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from scopetint.logger import get_logger

logger = get_logger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

DEFAULT_THEME_NAME = "default"
BASE16_DEFAULT_THEME_NAME = "base16_default"
BUILTIN_THEME_NAMES: tuple[str, ...] = (DEFAULT_THEME_NAME, BASE16_DEFAULT_THEME_NAME)

# Theme names double as file names, so no separators or leading dots
SAFE_THEME_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_+-]*$")

# Packaged data: built-in themes and the default theme directory
RUNTIME_DIR = Path(__file__).parent / "runtime"


def is_valid_theme_name(name: str) -> bool:
    """Check that a theme name is safe to use as a file name.

    Args:
        name: Candidate theme name.

    Returns:
        True if the name is valid.
    """
    return bool(SAFE_THEME_NAME_PATTERN.fullmatch(name))


@dataclass(frozen=True)
class Settings:
    """User-configurable settings stored on disk."""

    theme: str = DEFAULT_THEME_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    # None means detect from the environment
    true_color: bool | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Settings:
        """Create settings from a mapping, applying defaults for invalid values.

        Args:
            data: Mapping containing raw settings values.

        Returns:
            A Settings instance with validated values.
        """
        theme_value = _coerce_str(data.get("theme"))
        theme = theme_value if theme_value is not None and is_valid_theme_name(theme_value) else DEFAULT_THEME_NAME

        log_level_value = _coerce_str(data.get("log_level"))
        log_level = log_level_value if log_level_value is not None and log_level_value in LOG_LEVELS else DEFAULT_LOG_LEVEL

        true_color = _coerce_bool(data.get("true_color"))

        return cls(theme=theme, log_level=log_level, true_color=true_color)

    def to_dict(self) -> dict[str, object]:
        """Serialize settings to a dictionary.

        Returns:
            Dictionary representation of settings.
        """
        return {
            "theme": self.theme,
            "log_level": self.log_level,
            "true_color": self.true_color,
        }

    def resolve_true_color(self) -> bool:
        """Decide whether true color themes should be used.

        Returns:
            The configured value, or a guess from ``COLORTERM``.
        """
        if self.true_color is not None:
            return self.true_color
        return os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit")


def get_config_dir() -> Path:
    """Get the directory used for persistent configuration.

    Returns:
        Path to the configuration directory.
    """
    override_dir = os.environ.get("SCOPETINT_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "scopetint"

    return Path.home() / ".config" / "scopetint"


def get_user_themes_dir() -> Path:
    """Get the directory holding user theme files."""
    return get_config_dir() / "themes"


def get_default_themes_dir() -> Path:
    """Get the directory holding the themes shipped with scopetint."""
    return RUNTIME_DIR / "themes"


def get_settings_path() -> Path:
    """Get the full path to the settings file.

    Returns:
        Path to the settings JSON file.
    """
    return get_config_dir() / "settings.json"


def load_settings() -> Settings:
    """Load settings from disk.

    Returns:
        Loaded settings, or defaults if none exist.
    """
    settings_path = get_settings_path()
    if not settings_path.exists():
        return Settings()

    try:
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning(f"Failed to parse settings file {settings_path}: {exc}")
        return Settings()
    except OSError as exc:
        logger.warning(f"Failed to read settings file {settings_path}: {exc}")
        return Settings()

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {settings_path} contains invalid data")
        return Settings()

    return Settings.from_mapping(raw)


def save_settings(settings: Settings) -> None:
    """Persist settings to disk.

    Args:
        settings: Settings to persist.
    """
    settings_path = get_settings_path()
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning(f"Failed to save settings to {settings_path}: {exc}")


def _coerce_str(value: object) -> str | None:
    """Coerce a value into a string if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        String value or None.
    """
    if isinstance(value, str):
        return value
    return None


def _coerce_bool(value: object) -> bool | None:
    """Coerce a value into a boolean if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        Boolean value or None.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value.lower() in ("true", "1", "yes"):
            return True
        if value.lower() in ("false", "0", "no"):
            return False
    return None
