"""Settings persistence using QSettings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import QSettings

from ..config import (
    DEFAULT_OCR_LANGUAGE,
    SETTINGS_APPLICATION,
    SETTINGS_KEY_LANGUAGE,
    SETTINGS_KEY_TESSDATA,
    SETTINGS_ORGANIZATION,
)

logger = logging.getLogger(__name__)


def _clean(value: Any) -> Optional[str]:
    """Normalize a stored or assigned value; blank means unset."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def default_settings_path() -> Path:
    """Per-user INI file location chosen by Qt for this application."""
    settings = QSettings(
        QSettings.Format.IniFormat,
        QSettings.Scope.UserScope,
        SETTINGS_ORGANIZATION,
        SETTINGS_APPLICATION,
    )
    return Path(settings.fileName())


class SettingsStore:
    """Persist the OCR data directory and language.

    Implements the Settings port. Only custom values are written; when
    none is set the file is removed instead of keeping an empty record.
    A missing or unreadable file means defaults.
    """

    def __init__(self, path: Path | str | None = None, autoload: bool = True):
        """Initialize the store.

        Args:
            path: INI file path (defaults to the per-user location)
            autoload: Load the file immediately
        """
        self.path = Path(path) if path is not None else default_settings_path()
        self._data_directory_path: Optional[str] = None
        self._language_code: Optional[str] = None
        if autoload:
            self.load()

    @property
    def data_directory_path(self) -> Optional[str]:
        return self._data_directory_path

    @data_directory_path.setter
    def data_directory_path(self, value: Optional[str]) -> None:
        self._data_directory_path = _clean(value)

    @property
    def language_code(self) -> str:
        """Configured OCR language, or the default when unset."""
        return self._language_code or DEFAULT_OCR_LANGUAGE

    @language_code.setter
    def language_code(self, value: Optional[str]) -> None:
        self._language_code = _clean(value)

    @property
    def has_custom_values(self) -> bool:
        return self._data_directory_path is not None or self._language_code is not None

    def _open(self) -> QSettings:
        return QSettings(str(self.path), QSettings.Format.IniFormat)

    def load(self) -> None:
        """Load settings; a missing file keeps the defaults."""
        if not self.path.exists():
            logger.debug(f"No settings file at {self.path}, using defaults")
            return

        settings = self._open()
        if settings.status() != QSettings.Status.NoError:
            logger.warning(f"Could not read settings from {self.path}: {settings.status().name}")
            return

        self._data_directory_path = _clean(settings.value(SETTINGS_KEY_TESSDATA))
        self._language_code = _clean(settings.value(SETTINGS_KEY_LANGUAGE))
        logger.debug(f"Settings loaded from {self.path}")

    def save(self) -> None:
        """Write custom settings, or remove the file when there are none."""
        if not self.has_custom_values:
            if self.path.exists():
                try:
                    self.path.unlink()
                    logger.debug(f"Removed empty settings file {self.path}")
                except OSError as e:
                    logger.warning(f"Could not remove settings file {self.path}: {e}")
            return

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create settings directory {self.path.parent}: {e}")
            return

        settings = self._open()
        for key, value in (
            (SETTINGS_KEY_TESSDATA, self._data_directory_path),
            (SETTINGS_KEY_LANGUAGE, self._language_code),
        ):
            if value is None:
                settings.remove(key)
            else:
                settings.setValue(key, value)
        settings.sync()  # Ensure written to disk

        if settings.status() != QSettings.Status.NoError:
            logger.warning(f"Could not write settings to {self.path}: {settings.status().name}")
        else:
            logger.debug(f"Settings saved to {self.path}")

    def reset(self) -> None:
        """Clear all custom values (call save() to persist)."""
        self._data_directory_path = None
        self._language_code = None

    def as_dict(self) -> dict[str, Optional[str]]:
        """Effective settings for display."""
        return {
            "data_directory_path": self.data_directory_path,
            "language_code": self.language_code,
        }
