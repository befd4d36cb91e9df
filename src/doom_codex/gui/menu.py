"""
Menu builder for main application window.
"""

import logging
from typing import TYPE_CHECKING

from PySide6.QtGui import QAction, QKeySequence

from ..resources import get_icon, SECTION_ICONS

if TYPE_CHECKING:
    from .main_window import MainWindow


class MenuBuilder:
    """Builds and manages the application menu bar and toolbar."""

    def __init__(self, main_window: "MainWindow") -> None:
        """
        Initialize menu builder.

        Args:
            main_window: MainWindow instance that owns the menus
        """
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def setup_actions(self) -> None:
        """Create all actions for menus and toolbar."""
        self._setup_go_actions()
        self._setup_settings_actions()
        self._setup_help_actions()

        self.logger.debug("Actions created")

    def _setup_go_actions(self) -> None:
        """Create Go menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_back = QAction(get_icon("fa5s.arrow-left", "#ffffff"), "&Back", mw)
        mw.action_back.setShortcuts([QKeySequence.StandardKey.Back, QKeySequence("Esc")])
        mw.action_back.setStatusTip("Return to the previous screen")
        mw.action_back.triggered.connect(actions.back)
        mw.action_back.setEnabled(False)  # Enabled once there is history

        mw.action_home = QAction(get_icon("fa5s.home", "#ffffff"), "&Home", mw)
        mw.action_home.setShortcut(QKeySequence("Alt+Home"))
        mw.action_home.setStatusTip("Go to the home screen")
        mw.action_home.triggered.connect(actions.go_home)

        mw.action_demons = QAction(get_icon(SECTION_ICONS["demons"]), "&Demons", mw)
        mw.action_demons.setShortcut(QKeySequence("Ctrl+1"))
        mw.action_demons.setStatusTip("Browse demons")
        mw.action_demons.triggered.connect(actions.show_demons)

        mw.action_weapons = QAction(get_icon(SECTION_ICONS["weapons"]), "&Weapons", mw)
        mw.action_weapons.setShortcut(QKeySequence("Ctrl+2"))
        mw.action_weapons.setStatusTip("Browse weapons")
        mw.action_weapons.triggered.connect(actions.show_weapons)

        mw.action_exit = QAction("E&xit", mw)
        mw.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        mw.action_exit.setStatusTip("Exit the application")
        mw.action_exit.triggered.connect(mw.close)

    def _setup_settings_actions(self) -> None:
        """Create Settings menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_api_settings = QAction("&API Settings...", mw)
        mw.action_api_settings.setStatusTip("Configure the API host and request behavior")
        mw.action_api_settings.triggered.connect(actions.api_settings)

        mw.action_reload = QAction(get_icon("fa5s.sync-alt", "#ffffff"), "&Reload", mw)
        mw.action_reload.setShortcut(QKeySequence.StandardKey.Refresh)
        mw.action_reload.setStatusTip("Reload the current screen")
        mw.action_reload.triggered.connect(actions.reload)

    def _setup_help_actions(self) -> None:
        """Create Help menu actions."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_about = QAction("&About", mw)
        mw.action_about.setStatusTip("Show information about Doom Codex")
        mw.action_about.triggered.connect(actions.about)

    def setup_menus(self) -> None:
        """Create the menu bar."""
        mw = self.main_window
        menubar = mw.menuBar()

        go_menu = menubar.addMenu("&Go")
        go_menu.addAction(mw.action_back)
        go_menu.addAction(mw.action_home)
        go_menu.addSeparator()
        go_menu.addAction(mw.action_demons)
        go_menu.addAction(mw.action_weapons)
        go_menu.addSeparator()
        go_menu.addAction(mw.action_exit)

        settings_menu = menubar.addMenu("&Settings")
        settings_menu.addAction(mw.action_api_settings)
        settings_menu.addAction(mw.action_reload)

        help_menu = menubar.addMenu("&Help")
        help_menu.addAction(mw.action_about)

        self.logger.debug("Menus created")

    def setup_toolbar(self) -> None:
        """Create the navigation toolbar."""
        mw = self.main_window
        toolbar = mw.addToolBar("Navigation")
        toolbar.setObjectName("navigation_toolbar")
        toolbar.setMovable(False)
        toolbar.addAction(mw.action_back)
        toolbar.addAction(mw.action_home)
        toolbar.addAction(mw.action_reload)

        self.logger.debug("Toolbar created")
