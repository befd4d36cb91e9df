"""
Application settings for Doom Codex.

All values live in one QSettings store under a profile group, e.g.
doom_codex/doom_codex/default/api/base_url. Each concern gets its own
subsystem object sharing that store.
"""

import logging
from typing import Optional

from PySide6.QtCore import QSettings

from .api import ApiSettings
from .logging import LoggingSettings
from .types import ConfigVersion, ValidationResult
from .ui import UISettings
from .validation import SettingsValidator
from .values import read_bool, read_str

logger = logging.getLogger(__name__)


class AppSettings:
    """Entry point to the settings subsystems of one profile."""

    def __init__(self, profile: str = "default", store: Optional[QSettings] = None):
        """
        Args:
            profile: Group the profile's keys are stored under
            store: QSettings to use instead of the platform store (tests pass an INI file)
        """
        self.settings = store if store is not None else QSettings("doom_codex", "doom_codex")
        self.profile = profile
        self.settings.beginGroup(profile)

        self.api = ApiSettings(self.settings)
        self.logging = LoggingSettings(self.settings)
        self.ui = UISettings(self.settings)
        self._validator = SettingsValidator(self)

        if not read_str(self.settings, "app/version"):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info(f"New settings profile '{profile}' created")

        logger.debug(f"Profile '{profile}' loaded from {self.file_path}")

    @property
    def file_path(self) -> str:
        """Where the store keeps its data."""
        return self.settings.fileName()

    @property
    def version(self) -> str:
        return read_str(self.settings, "app/version", ConfigVersion.CURRENT.value)

    @property
    def is_first_run(self) -> bool:
        return read_bool(self.settings, "app/first_run", True)

    def set_first_run_complete(self) -> None:
        self.settings.setValue("app/first_run", False)
        self.settings.sync()

    def validate(self) -> ValidationResult:
        """Check the stored values; see SettingsValidator."""
        return self._validator.validate()

    def close(self) -> None:
        """Leave the profile group and flush pending writes."""
        self.settings.endGroup()
        self.settings.sync()
