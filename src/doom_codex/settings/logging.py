"""
Log output settings for Doom Codex.

Besides the console and file outputs, two logger groups get their own
threshold: the API gateway (one line per request at DEBUG) and the HTTP
stack underneath it, which is very chatty below WARNING.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional

from .values import read_bool, read_str

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_FILE = "logs/doom_codex.csv"

# settings key -> (default level, loggers it applies to)
LOGGER_GROUPS = {
    "logging/console_level": ("INFO", ()),
    "logging/api_level": ("INFO", ("doom_codex.api",)),
    "logging/http_level": ("WARNING", ("httpx", "httpcore")),
}


class LoggingSettings:
    """Read-only view of the logging keys; values are edited in the settings file."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _level(self, key: str) -> int:
        default, _ = LOGGER_GROUPS[key]
        name = read_str(self.settings, key, default).strip().upper()
        if name not in LEVEL_NAMES:
            logger.warning(f"Unknown log level {name!r} for {key}, using {default}")
            name = default
        return logging.getLevelName(name)

    @property
    def console_level(self) -> int:
        """Threshold of the console handler."""
        return self._level("logging/console_level")

    @property
    def console_colors(self) -> bool:
        return read_bool(self.settings, "logging/console_colors", True)

    @property
    def log_file(self) -> Optional[Path]:
        """CSV log destination, or None while file logging is off."""
        if not read_bool(self.settings, "logging/file_enabled", False):
            return None
        return Path(read_str(self.settings, "logging/file_path", DEFAULT_LOG_FILE))

    def logger_levels(self) -> Dict[str, int]:
        """Per-logger thresholds to apply on startup."""
        levels: Dict[str, int] = {}
        for key, (_, names) in LOGGER_GROUPS.items():
            for name in names:
                levels[name] = self._level(key)
        return levels

    def invalid_levels(self) -> List[str]:
        """Stored level keys whose value is not a level name."""
        invalid = []
        for key, (default, _) in LOGGER_GROUPS.items():
            name = read_str(self.settings, key, default).strip().upper()
            if name not in LEVEL_NAMES:
                invalid.append(key)
        return invalid
