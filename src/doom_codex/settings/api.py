"""
API connection settings for Doom Codex.
"""

import logging
from typing import TYPE_CHECKING

import httpx

from ..views.entities import KeyPolicy
from .types import ConfigError
from .values import read_float, read_int, read_str

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_WORKERS = 8


def check_base_url(value: str) -> str:
    """Return a normalized base URL or raise ConfigError."""
    try:
        url = httpx.URL(value.strip())
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigError(f"Invalid API base URL {value!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(f"API base URL must be an absolute http(s) URL: {value!r}")
    return str(url).rstrip("/")


class ApiSettings:
    """Manages the API host and request behavior."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @property
    def base_url(self) -> str:
        """Get API base URL."""
        return read_str(self.settings, "api/base_url", DEFAULT_BASE_URL)

    @base_url.setter
    def base_url(self, value: str) -> None:
        """Set API base URL (must be an absolute http(s) URL)."""
        try:
            normalized = check_base_url(value)
        except ConfigError as e:
            logger.warning(f"{e}, keeping current: {self.base_url}")
            return
        self.settings.setValue("api/base_url", normalized)
        self.settings.sync()

    @property
    def timeout(self) -> float:
        """Get request timeout in seconds (0 disables the timeout)."""
        return read_float(self.settings, "api/timeout", DEFAULT_TIMEOUT)

    @timeout.setter
    def timeout(self, value: float) -> None:
        """Set request timeout in seconds."""
        if value >= 0:
            self.settings.setValue("api/timeout", float(value))
            self.settings.sync()
        else:
            logger.warning(f"Invalid API timeout: {value}, keeping current: {self.timeout}")

    @property
    def max_workers(self) -> int:
        """Get number of worker threads used for fetches."""
        return read_int(self.settings, "api/max_workers", DEFAULT_MAX_WORKERS)

    @max_workers.setter
    def max_workers(self, value: int) -> None:
        """Set number of worker threads used for fetches."""
        if value >= 1:
            self.settings.setValue("api/max_workers", int(value))
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid worker count: {value}, keeping current: {self.max_workers}"
            )

    @property
    def key_policy(self) -> KeyPolicy:
        """Get which key list rows pass to detail screens."""
        value = read_str(self.settings, "api/key_policy", KeyPolicy.DISPLAY_NAME.value)
        try:
            return KeyPolicy(value)
        except ValueError:
            return KeyPolicy.DISPLAY_NAME

    @key_policy.setter
    def key_policy(self, value: KeyPolicy) -> None:
        """Set which key list rows pass to detail screens."""
        self.settings.setValue("api/key_policy", KeyPolicy(value).value)
        self.settings.sync()
