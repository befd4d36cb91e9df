"""
Doom Codex entry point: python -m doom_codex
"""

import logging
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication, QMessageBox

from . import __version__
from .resources import get_app_icon
from .resources.style_manager import style_manager
from .settings import AppSettings
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def show_error_dialog(title: str, message: str, details: Optional[str] = None) -> None:
    """Modal critical message; creates a QApplication if none exists yet."""
    if QApplication.instance() is None:
        QApplication(sys.argv)
    box = QMessageBox(QMessageBox.Icon.Critical, title, message)
    if details:
        box.setDetailedText(details)
    box.exec()


def create_application(argv: List[str]) -> QApplication:
    app = QApplication(argv)
    app.setApplicationName("Doom Codex")
    app.setApplicationVersion(__version__)
    app.setOrganizationName("doom_codex")
    app.setWindowIcon(get_app_icon())
    app.setStyle("Fusion")
    style_manager.apply_app_style(app, "main")
    return app


def check_settings(settings: AppSettings) -> bool:
    """Log validation findings; show a dialog and return False on errors."""
    result = settings.validate()
    for warning in result.warnings:
        logger.warning(f"Settings: {warning}")
    if result.is_valid:
        return True

    for error in result.errors:
        logger.error(f"Settings: {error}")
    show_error_dialog(
        "Configuration Error",
        f"The settings in {settings.file_path} cannot be used.",
        "\n".join(result.errors),
    )
    return False


def main(argv: Optional[List[str]] = None) -> int:
    """Run the application and return its exit code."""
    argv = sys.argv if argv is None else argv
    try:
        settings = AppSettings()
        app = create_application(argv)
        setup_logging(settings)
        logger.info(f"Doom Codex {__version__}, API host {settings.api.base_url}")

        if not check_settings(settings):
            return 1

        # GUI modules are imported once logging is in place
        from .gui import MainWindow

        window = MainWindow(settings)
        window.show()
        if settings.is_first_run:
            settings.set_first_run_complete()
        return app.exec()

    except Exception as e:
        logger.exception("Startup failed")
        show_error_dialog("Application Error", "Doom Codex could not start.", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
