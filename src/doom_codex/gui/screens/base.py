"""
Base class for screens mounted by the navigator.
"""

import logging
from typing import Optional

from PySide6.QtWidgets import QLabel, QStackedWidget, QVBoxLayout, QWidget

from ...resources.style_manager import apply_style_class
from ...views import ViewScope


class BaseScreen(QWidget):
    """A navigable screen whose fetches live as long as it is mounted."""

    def __init__(
        self,
        title: str,
        scope: Optional[ViewScope] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.setObjectName("screen")
        self.title = title
        self.scope = scope

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(16, 16, 16, 16)

    def make_title_label(self) -> QLabel:
        label = QLabel(self.title)
        apply_style_class(label, "title")
        return label

    def start(self) -> None:
        """Called once after the screen is shown."""

    def dispose(self) -> None:
        """Cancel pending fetches and release the widget."""
        if self.scope is not None:
            self.scope.close()
        parent = self.parentWidget()
        if isinstance(parent, QStackedWidget):
            parent.removeWidget(self)
        self.deleteLater()
        self.logger.debug(f"Screen '{self.title}' disposed")
