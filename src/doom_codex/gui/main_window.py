"""
Main application window for Doom Codex.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QStackedWidget, QWidget
from PySide6.QtGui import QAction, QCloseEvent

from ..api import DoomApiClient
from ..navigation import HOME, Navigator, Route
from ..resources import get_app_icon
from ..settings import AppSettings
from ..views import (
    EntityDetailViewModel,
    EntityListViewModel,
    ViewScope,
    kind_for_route,
)
from .actions import MainWindowActions
from .dispatch import QtDispatcher
from .menu import MenuBuilder
from .screens import BaseScreen, EntityDetailScreen, EntityListScreen, HomeScreen


class MainWindow(QMainWindow):
    """Main application window.

    Owns the fetch executor, the API client and the navigator. Screens are
    stacked in the central widget; exactly one is mounted at a time.
    """

    # Menu actions (created by MenuBuilder)
    action_back: QAction
    action_home: QAction
    action_demons: QAction
    action_weapons: QAction
    action_exit: QAction
    action_api_settings: QAction
    action_reload: QAction
    action_about: QAction

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings

        # Services injected into every screen
        self.dispatcher = QtDispatcher(self)
        self.executor = self._create_executor()
        self.client = DoomApiClient.from_settings(settings)

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.navigator: Navigator[BaseScreen] = Navigator(self.create_screen, start=HOME)
        self.navigator.add_listener(self._on_screen_mounted)

        # Initialize managers
        self.menu_builder = MenuBuilder(self)
        self.main_window_actions = MainWindowActions(self)

        # Setup UI components
        self.menu_builder.setup_actions()
        self.menu_builder.setup_menus()
        self.menu_builder.setup_toolbar()
        self.setup_status_bar()

        if not self.settings.ui.restore_window_geometry(self):
            # Default size if no saved geometry
            self.resize(480, 800)

        self.setWindowTitle("Doom Codex")
        self.setWindowIcon(get_app_icon())

        self.navigator.start()

        self.logger.info("Main window initialized")

    def _create_executor(self) -> ThreadPoolExecutor:
        workers = self.settings.api.max_workers
        self.logger.debug(f"Creating fetch executor with {workers} workers")
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="fetch")

    def setup_status_bar(self) -> None:
        """Setup the status bar."""
        self.status_bar = self.statusBar()
        self.status_bar.showMessage(f"API host: {self.settings.api.base_url}", 5000)
        self.logger.debug("Status bar created")

    # === SCREENS ===

    def create_screen(self, route: Route) -> BaseScreen:
        """Build the screen for a route (navigator mount factory)."""
        if route.name == HOME:
            screen: BaseScreen = HomeScreen(self.navigator.navigate)
        else:
            kind = kind_for_route(route.name)
            scope = ViewScope(self.executor, self.dispatcher, name=str(route))
            if route.is_detail:
                screen = EntityDetailScreen(
                    EntityDetailViewModel(kind, route.require_key(), self.client, scope)
                )
            else:
                screen = EntityListScreen(
                    EntityListViewModel(
                        kind,
                        self.client,
                        scope,
                        navigate=self.navigator.navigate,
                        key_policy=self.settings.api.key_policy,
                    )
                )

        self.stack.addWidget(screen)
        return screen

    def _on_screen_mounted(self, route: Route, screen: BaseScreen) -> None:
        self.stack.setCurrentWidget(screen)
        self.action_back.setEnabled(self.navigator.can_go_back)
        self.setWindowTitle(f"Doom Codex - {screen.title}")
        screen.start()

    # === SERVICES ===

    def rebuild_services(self) -> None:
        """Recreate executor and client from settings and reload the screen."""
        old_executor, old_client = self.executor, self.client
        self.executor = self._create_executor()
        self.client = DoomApiClient.from_settings(self.settings)

        # Re-mount disposes the screen bound to the old services first
        self.navigator.reload()

        old_executor.shutdown(wait=False, cancel_futures=True)
        old_client.close()
        self.logger.info(f"Services rebuilt for {self.settings.api.base_url}")

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle window close event to release services and save settings."""
        self.navigator.close()
        self.executor.shutdown(wait=False, cancel_futures=True)
        self.client.close()

        self.settings.ui.save_window_geometry(self)
        self.logger.info("Window geometry saved")
        super().closeEvent(event)
