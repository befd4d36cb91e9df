"""
Persistent settings for Doom Codex, stored with QSettings.

    settings = AppSettings()
    client = DoomApiClient.from_settings(settings)
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .api import ApiSettings
from .logging import LoggingSettings
from .ui import UISettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "ApiSettings",
    "LoggingSettings",
    "UISettings",
]
