"""Persistent user settings.

The levels only need two things from storage: the pass thresholds and a
way to record a completed letter. SettingsStore names that contract;
JsonSettingsStore implements it on top of a single JSON file holding a
UserSettings record.
"""

from pathlib import Path
from typing import Protocol

import structlog
from pydantic import ValidationError

from alphaquest.config import Thresholds, UserSettings
from alphaquest.exceptions import SettingsLoadError, SettingsSaveError

logger = structlog.get_logger("alphaquest.store")

DEFAULT_SETTINGS_FILENAME = "alphaquest_user_settings.json"


def default_settings_path() -> Path:
    """Location used when no settings file is given."""
    return Path.home() / ".alphaquest" / DEFAULT_SETTINGS_FILENAME


class SettingsStore(Protocol):
    """What the levels read from and write to persistent settings."""

    def load_thresholds(self) -> Thresholds: ...

    def save_completed_letter(self, letter_id: str) -> None: ...


class JsonSettingsStore:
    """Settings store backed by a JSON file.

    A missing or undecodable file is never an error on load: the store
    falls back to default settings and logs the problem. Write failures
    raise SettingsSaveError.

    Example:
        store = JsonSettingsStore(Path("settings.json"))
        thresholds = store.load_thresholds()
        store.save_completed_letter("a")
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else default_settings_path()

    @property
    def path(self) -> Path:
        return self._path

    def read_user_settings(self) -> UserSettings:
        """Read the settings file strictly.

        Raises:
            SettingsLoadError: If the file is missing, unreadable or invalid
        """
        try:
            raw = self._path.read_bytes()
        except OSError as e:
            raise SettingsLoadError(str(self._path), str(e)) from e
        try:
            return UserSettings.model_validate_json(raw)
        except ValidationError as e:
            raise SettingsLoadError(str(self._path), f"{e.error_count()} validation error(s)") from e

    def load_user_settings(self) -> UserSettings:
        """Read the settings file, falling back to defaults."""
        if not self._path.exists():
            logger.debug("Settings file missing, using defaults", path=str(self._path))
            return UserSettings()
        try:
            return self.read_user_settings()
        except SettingsLoadError as e:
            logger.warning("Settings file unreadable, using defaults", path=e.path, reason=e.reason)
            return UserSettings()

    def save_user_settings(self, settings: UserSettings) -> None:
        """Write the settings record.

        Raises:
            SettingsSaveError: If the file cannot be written
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise SettingsSaveError(str(self._path), str(e)) from e
        logger.debug("Settings saved", path=str(self._path))

    def load_thresholds(self) -> Thresholds:
        return self.load_user_settings().thresholds()

    def save_completed_letter(self, letter_id: str) -> None:
        """Add a letter to the completed set (stored upper case)."""
        settings = self.load_user_settings()
        letter = letter_id.strip().upper()
        if letter in settings.completed_letters:
            return
        updated = settings.model_copy(
            update={"completed_letters": settings.completed_letters | {letter}}
        )
        self.save_user_settings(updated)
        logger.info("Letter completed", letter=letter)

    def set_thresholds(
        self,
        fill: int | None = None,
        trace: int | None = None,
        recognition: int | None = None,
    ) -> UserSettings:
        """Update any of the three thresholds and persist.

        Raises:
            ValidationError: If a value is outside 0-100
            SettingsSaveError: If the file cannot be written
        """
        current = self.load_user_settings()
        data = current.model_dump()
        if fill is not None:
            data["fill_threshold_percentage"] = fill
        if trace is not None:
            data["trace_threshold_percentage"] = trace
        if recognition is not None:
            data["shape_recognition_sensitivity"] = recognition
        updated = UserSettings.model_validate(data)
        self.save_user_settings(updated)
        return updated

    def mark_tutorial_completed(self) -> None:
        settings = self.load_user_settings()
        self.save_user_settings(settings.model_copy(update={"has_completed_tutorial": True}))

    def set_music_enabled(self, enabled: bool) -> None:
        settings = self.load_user_settings()
        self.save_user_settings(settings.model_copy(update={"is_music_enabled": enabled}))

    def reset(self) -> UserSettings:
        """Restore default settings on disk."""
        defaults = UserSettings()
        self.save_user_settings(defaults)
        logger.info("Settings reset", path=str(self._path))
        return defaults
