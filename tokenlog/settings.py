"""Persistent user settings.

Settings live in a JSON file in the user's config directory and survive
application restarts. Missing or invalid values fall back to the
defaults in LoggerConstants.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import LoggerConstants

logger = logging.getLogger(__name__)

APP_NAME = "tokenlog"


def default_settings() -> Dict[str, Any]:
    """Return a fresh dict of default settings."""
    return {
        'log_dir': LoggerConstants.DEFAULT_LOG_DIR,
        'letters': dict(LoggerConstants.DEFAULT_LETTERS),
        'line_end_marker': LoggerConstants.DEFAULT_LINE_END_MARKER,
        'remark_color': LoggerConstants.REMARK_COLOR,
        'undo_limit': None,
    }


class SettingsPersistence:
    """Manages persistent storage of user settings."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize settings persistence.

        Args:
            config_dir: Directory holding settings.json. Defaults to the
                platform config directory.
        """
        if config_dir is None:
            config_dir = Path(platformdirs.user_config_dir(APP_NAME))
        self._config_dir = Path(config_dir)
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_raw(self) -> Dict[str, Any]:
        """Load the settings file as stored on disk.

        Returns:
            Parsed settings, or empty dict if the file doesn't exist or
            can't be read.
        """
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def load_settings(self) -> Dict[str, Any]:
        """Load settings merged over the defaults.

        Invalid values are dropped with a warning and the default is used.
        """
        settings = default_settings()
        for key, value in self._load_raw().items():
            if not self.validate_setting(key, value):
                logger.warning(f"Ignoring invalid value for setting {key}: {value!r}")
                continue
            settings[key] = value
        return settings

    def save_settings(self, settings: Dict[str, Any]) -> bool:
        """Save settings to disk atomically.

        Returns:
            True if save was successful, False otherwise.
        """
        self._ensure_config_dir()

        temp_file = self._settings_file.with_suffix(LoggerConstants.ATOMIC_SAVE_SUFFIX)
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2, ensure_ascii=False)
            temp_file.replace(self._settings_file)
            self._settings_cache = dict(settings)
            return True

        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Args:
            key: Setting key name.
            value: Setting value to validate.

        Returns:
            True if setting is valid, False otherwise.
        """
        if key == 'undo_limit':
            if value is None:
                return True  # unbounded history
            return isinstance(value, int) and not isinstance(value, bool) and value > 0

        if key in ('log_dir', 'remark_color'):
            return isinstance(value, str) and bool(value)

        if key == 'line_end_marker':
            return isinstance(value, str)

        if key == 'letters':
            if not isinstance(value, dict) or not value:
                return False
            return all(
                isinstance(k, str) and len(k) == 1 and isinstance(v, str)
                for k, v in value.items()
            )

        # Unknown settings are considered valid (forward compatibility)
        return True

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
