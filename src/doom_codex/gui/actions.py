"""Action handlers for MainWindow.

Keeps UI action logic separate from window construction/layout.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtWidgets import QDialog

from .. import __version__
from ..navigation import DEMONS, HOME, WEAPONS, Route
from .dialogs import ApiSettingsDialog, show_about_dialog

if TYPE_CHECKING:
    from .main_window import MainWindow


class MainWindowActions:
    """Handles actions and events for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def back(self) -> None:
        """Return to the previous screen."""
        if not self.main_window.navigator.back():
            self.logger.debug("Back requested at root, ignoring")

    def go_home(self) -> None:
        """Go to the home screen and reset history."""
        self.main_window.navigator.navigate(Route(HOME), clear_stack=True)

    def show_demons(self) -> None:
        self.main_window.navigator.navigate(Route(DEMONS))

    def show_weapons(self) -> None:
        self.main_window.navigator.navigate(Route(WEAPONS))

    def reload(self) -> None:
        """Re-mount the current screen, re-issuing its requests."""
        mw = self.main_window
        mw.logger.info("Reload requested")
        mw.navigator.reload()

    def api_settings(self) -> None:
        """Show API settings dialog and apply changes."""
        mw = self.main_window
        dialog = ApiSettingsDialog(mw.settings, mw)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            mw.rebuild_services()
            mw.status_bar.showMessage(f"API host: {mw.settings.api.base_url}", 5000)

    def about(self) -> None:
        """Show about dialog."""
        mw = self.main_window
        show_about_dialog(
            version=__version__,
            base_url=mw.settings.api.base_url,
            parent=mw,
        )
