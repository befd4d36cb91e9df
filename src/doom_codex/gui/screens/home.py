"""
Home screen with the section buttons.
"""

from typing import Callable, Optional

from PySide6.QtCore import QSize, Qt
from PySide6.QtWidgets import QPushButton, QWidget

from ...navigation import DEMONS, WEAPONS, Route
from ...resources import SECTION_ICONS, get_icon
from ...resources.style_manager import apply_style_class
from .base import BaseScreen


class HomeScreen(BaseScreen):
    """Entry screen: one button per browsable section."""

    SECTIONS = ((DEMONS, "Demons"), (WEAPONS, "Weapons"))

    def __init__(self, navigate: Callable[[Route], object], parent: Optional[QWidget] = None):
        super().__init__("Doom Codex", parent=parent)
        self._navigate = navigate
        self.buttons: dict[str, QPushButton] = {}
        self.setup_ui()

    def setup_ui(self) -> None:
        self.main_layout.setSpacing(20)
        self.main_layout.addStretch(1)

        for route_name, label in self.SECTIONS:
            button = QPushButton(label)
            button.setIcon(get_icon(SECTION_ICONS[route_name]))
            button.setIconSize(QSize(20, 20))
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            apply_style_class(button, "section")
            button.clicked.connect(lambda _checked=False, name=route_name: self.open_section(name))
            self.main_layout.addWidget(button, 0, Qt.AlignmentFlag.AlignHCenter)
            self.buttons[route_name] = button

        self.main_layout.addStretch(1)

    def open_section(self, route_name: str) -> None:
        self._navigate(Route(route_name))
