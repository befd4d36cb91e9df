"""Unit tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest

from doom_codex.settings import AppSettings, ConfigError
from doom_codex.settings.api import DEFAULT_BASE_URL, check_base_url
from doom_codex.views import KeyPolicy


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging's changes to the root logger after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, app_settings: AppSettings) -> None:
        """Test AppSettings can be initialized with defaults."""
        assert app_settings.api.base_url == DEFAULT_BASE_URL
        assert app_settings.api.timeout == 10.0
        assert app_settings.api.max_workers == 8
        assert app_settings.api.key_policy is KeyPolicy.DISPLAY_NAME
        assert app_settings.version == "1.0"

    def test_app_settings_validation(self, app_settings: AppSettings) -> None:
        """Test default configuration is valid with a plaintext warning."""
        validation = app_settings.validate()
        assert validation.is_valid
        assert any("plaintext" in warning for warning in validation.warnings)

    def test_first_run(self, app_settings: AppSettings) -> None:
        """Test first run flag is set once and can be completed."""
        assert app_settings.is_first_run
        app_settings.set_first_run_complete()
        assert not app_settings.is_first_run

    def test_values_persist_per_profile(self, qsettings_store) -> None:
        """Test values written through one instance are read by the next."""
        first = AppSettings(profile="alpha", store=qsettings_store)
        first.api.base_url = "https://doom.example/api/"
        first.close()

        second = AppSettings(profile="alpha", store=qsettings_store)
        assert second.api.base_url == "https://doom.example/api"
        assert second.file_path.endswith("doom_codex.ini")
        second.close()

        other = AppSettings(profile="beta", store=qsettings_store)
        assert other.api.base_url == DEFAULT_BASE_URL


class TestApiSettings:
    """Test API settings setters and validation."""

    @pytest.mark.parametrize(
        "value",
        ["not a url", "ftp://doom.example", "/relative/path", ""],
    )
    def test_check_base_url_rejects(self, value: str) -> None:
        """Test only absolute http(s) URLs are accepted."""
        with pytest.raises(ConfigError):
            check_base_url(value)

    def test_check_base_url_strips_trailing_slash(self) -> None:
        """Test the base URL is trimmed and loses its trailing slash."""
        assert check_base_url(" http://10.0.2.2:8000/ ") == "http://10.0.2.2:8000"

    def test_invalid_base_url_is_ignored(self, app_settings: AppSettings) -> None:
        """Test an invalid URL leaves the stored host unchanged."""
        app_settings.api.base_url = "ftp://doom.example"
        assert app_settings.api.base_url == DEFAULT_BASE_URL

    def test_timeout(self, app_settings: AppSettings) -> None:
        """Test negative timeouts are rejected."""
        app_settings.api.timeout = 2.5
        assert app_settings.api.timeout == 2.5

        app_settings.api.timeout = -1
        assert app_settings.api.timeout == 2.5

    def test_zero_timeout_warns_about_exit(self, app_settings: AppSettings) -> None:
        """Test a disabled timeout is valid but warns that exit can hang."""
        app_settings.api.timeout = 0
        validation = app_settings.validate()
        assert validation.is_valid
        assert any("exiting" in warning for warning in validation.warnings)

    def test_max_workers(self, app_settings: AppSettings) -> None:
        """Test worker count must be at least one."""
        app_settings.api.max_workers = 2
        assert app_settings.api.max_workers == 2

        app_settings.api.max_workers = 0
        assert app_settings.api.max_workers == 2

    def test_key_policy(self, app_settings: AppSettings) -> None:
        """Test key policy round-trips through the store."""
        app_settings.api.key_policy = KeyPolicy.SUMMARY
        assert app_settings.api.key_policy is KeyPolicy.SUMMARY

    def test_unknown_key_policy_falls_back(self, app_settings: AppSettings) -> None:
        """Test an unknown stored policy reads as the default."""
        app_settings.settings.setValue("api/key_policy", "bogus")
        assert app_settings.api.key_policy is KeyPolicy.DISPLAY_NAME

    def test_stored_invalid_url_is_a_validation_error(self, app_settings: AppSettings) -> None:
        """Test a hand-edited bad host fails validation."""
        app_settings.settings.setValue("api/base_url", "doom.example")
        validation = app_settings.validate()
        assert not validation.is_valid
        assert validation.errors


class TestLoggingSettings:
    """Test logging settings."""

    def test_defaults(self, app_settings: AppSettings) -> None:
        """Test console at INFO, colors on, no log file."""
        config = app_settings.logging
        assert config.console_level == logging.INFO
        assert config.console_colors
        assert config.log_file is None

    def test_logger_groups(self, app_settings: AppSettings) -> None:
        """Test the API and HTTP logger groups get their own thresholds."""
        app_settings.settings.setValue("logging/api_level", "debug")
        levels = app_settings.logging.logger_levels()
        assert levels["doom_codex.api"] == logging.DEBUG
        assert levels["httpx"] == logging.WARNING
        assert levels["httpcore"] == logging.WARNING

    def test_unknown_level_falls_back_with_warning(self, app_settings: AppSettings) -> None:
        """Test a bad level name reads as the default and is reported."""
        app_settings.settings.setValue("logging/http_level", "LOUD")
        assert app_settings.logging.logger_levels()["httpx"] == logging.WARNING
        assert app_settings.logging.invalid_levels() == ["logging/http_level"]
        assert any("logging/http_level" in w for w in app_settings.validate().warnings)

    def test_log_file_when_enabled(self, app_settings: AppSettings, tmp_path: Path) -> None:
        """Test the CSV log path is only set while file logging is enabled."""
        app_settings.settings.setValue("logging/file_enabled", "true")
        app_settings.settings.setValue("logging/file_path", str(tmp_path / "codex.csv"))
        assert app_settings.logging.log_file == tmp_path / "codex.csv"


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(
        self, app_settings: AppSettings, restore_root_logger
    ) -> None:
        """Test logging setup installs one console handler and logger levels."""
        from doom_codex.utils.logging_config import setup_logging

        app_settings.settings.setValue("logging/console_colors", "false")
        setup_logging(settings=app_settings)

        assert logging.getLogger("doom_codex").level == logging.DEBUG
        assert logging.getLogger("doom_codex.api").level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1

    def test_logging_setup_with_file(
        self, app_settings: AppSettings, tmp_path: Path, restore_root_logger
    ) -> None:
        """Test file logging writes CSV rows to the configured path."""
        from doom_codex.utils.logging_config import setup_logging

        log_file = tmp_path / "logs" / "codex.csv"
        app_settings.settings.setValue("logging/file_enabled", True)
        app_settings.settings.setValue("logging/file_path", str(log_file))
        setup_logging(settings=app_settings)

        logging.getLogger("doom_codex.tests").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert len(logging.getLogger().handlers) == 2
        assert '"doom_codex.tests"' in log_file.read_text(encoding="utf-8")

    def test_colored_formatter_wraps_level_name(self) -> None:
        """Test only the level name is colored."""
        from doom_codex.utils.logging_config import ColoredFormatter

        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
        record = logging.LogRecord("doom_codex", logging.ERROR, __file__, 1, "boom", None, None)
        assert formatter.format(record) == "\033[31mERROR\033[0m boom"

    def test_csv_formatter_escapes_quotes(self) -> None:
        """Test CSV rows quote every field and double embedded quotes."""
        from doom_codex.utils.logging_config import CSVFormatter

        record = logging.LogRecord(
            "doom_codex.api", logging.INFO, __file__, 42, 'GET "imp"', None, None
        )
        line = CSVFormatter().format(record)
        assert line.endswith('"doom_codex.api";"42";"GET ""imp"""')
