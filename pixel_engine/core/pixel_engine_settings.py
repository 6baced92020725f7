"""
Settings manager for the pixel engine
Handles loading and saving default tool and sprite sheet options
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

from ..logging_config import get_logger
from .pixel_engine_constants import (
    DEFAULT_SHEET_COLUMNS,
    DEFAULT_SHEET_H_ALIGN,
    DEFAULT_SHEET_SPACING,
    DEFAULT_SHEET_V_ALIGN,
    DEFAULT_TOLERANCE,
    SETTINGS_DIR_NAME,
    SETTINGS_ENV_VAR,
    SETTINGS_FILE_NAME,
)
from .pixel_engine_exceptions import FileOperationError
from .pixel_engine_models import SheetLayout

logger = get_logger("core.settings")

DEFAULT_SETTINGS: dict[str, Any] = {
    "tolerance": DEFAULT_TOLERANCE,
    "log_level": "INFO",
    "sheet": {
        "columns": DEFAULT_SHEET_COLUMNS,
        "spacing": DEFAULT_SHEET_SPACING,
        "h_align": DEFAULT_SHEET_H_ALIGN,
        "v_align": DEFAULT_SHEET_V_ALIGN,
    },
}


class SettingsManager:
    """Manages engine settings with JSON persistence"""

    def __init__(self, settings_file: Optional[Union[str, Path]] = None):
        self.settings_file = self._get_settings_path(settings_file)
        self.settings = self._load_settings()

    def _get_settings_path(self, settings_file: Optional[Union[str, Path]]) -> Path:
        """Explicit path, then $PIXEL_ENGINE_SETTINGS, then ~/.pixel_engine"""
        if settings_file is not None:
            return Path(settings_file)

        env_path = os.environ.get(SETTINGS_ENV_VAR)
        if env_path:
            return Path(env_path)

        return Path(os.path.expanduser("~")) / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME

    def _load_settings(self) -> dict[str, Any]:
        """Load settings from file, merged over the defaults"""
        settings = self._get_default_settings()
        if not self.settings_file.exists():
            return settings

        try:
            with open(self.settings_file) as f:
                stored = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.settings_file}: {e}")
            return settings

        if not isinstance(stored, dict):
            logger.warning(f"Ignoring settings file {self.settings_file}: not an object")
            return settings

        _merge(settings, stored)
        return settings

    def _get_default_settings(self) -> dict[str, Any]:
        return copy.deepcopy(DEFAULT_SETTINGS)

    def save_settings(self) -> None:
        """Save current settings to file"""
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, "w") as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            raise FileOperationError(
                f"Could not save settings to {self.settings_file}: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value (dotted keys reach into nested sections)"""
        return _lookup(self.settings, key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value in memory; call save_settings to persist"""
        keys = key.split(".")
        target = self.settings
        for k in keys[:-1]:
            if not isinstance(target.get(k), dict):
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value

    def get_int(self, key: str) -> int:
        """Get an integer setting, falling back to its default if the stored value is not one"""
        value = self.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return self._fallback(key, value, "an integer")

    def get_str(self, key: str) -> str:
        """Get a string setting, falling back to its default if the stored value is not one"""
        value = self.get(key)
        if isinstance(value, str):
            return value
        return self._fallback(key, value, "a string")

    def _fallback(self, key: str, value: Any, expected: str) -> Any:
        default = _lookup(DEFAULT_SETTINGS, key)
        if default is None:
            raise KeyError(f"No default for setting {key!r}")
        logger.warning(
            f"Setting {key!r} should be {expected}, got {value!r}; using default {default!r}"
        )
        return default

    def sheet_layout(self) -> SheetLayout:
        """Build a SheetLayout from the stored sheet section"""
        return SheetLayout(
            columns=self.get_int("sheet.columns"),
            spacing=self.get_int("sheet.spacing"),
            h_align=self.get_str("sheet.h_align"),
            v_align=self.get_str("sheet.v_align"),
        )

    def reset(self) -> None:
        self.settings = self._get_default_settings()


def _merge(target: dict[str, Any], overrides: dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


def _lookup(settings: dict[str, Any], key: str, default: Any = None) -> Any:
    value = settings
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value
