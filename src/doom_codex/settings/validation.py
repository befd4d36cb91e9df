"""
Startup checks for Doom Codex settings.
"""

from typing import List, TYPE_CHECKING

from .api import check_base_url
from .types import ConfigError, ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings


class SettingsValidator:
    """Sorts problems in the stored settings into errors and warnings.

    Errors stop the application from starting; warnings are logged.
    """

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        api = self.settings.api
        try:
            base_url = check_base_url(api.base_url)
        except ConfigError as e:
            errors.append(str(e))
        else:
            if base_url.startswith("http://"):
                warnings.append(f"API requests are sent over plaintext HTTP: {base_url}")

        if api.timeout < 0:
            errors.append(f"API timeout must not be negative: {api.timeout}")
        elif api.timeout == 0:
            warnings.append(
                "API timeout disabled: a hung request never fails and keeps "
                "the application from exiting until the server answers"
            )

        if api.max_workers < 1:
            errors.append(f"Worker count must be at least 1: {api.max_workers}")

        for key in self.settings.logging.invalid_levels():
            warnings.append(f"Unknown log level in {key}, using the default")

        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
