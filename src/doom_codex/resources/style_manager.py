"""
Qt stylesheets for Doom Codex.

Stylesheets are .qss files next to this module under styles/. Widgets opt
into a rule with apply_style_class(), matched in QSS as [class="title"].
"""

import logging
from functools import lru_cache
from pathlib import Path

from PySide6.QtWidgets import QApplication, QWidget

STYLES_DIR = Path(__file__).parent / "styles"


class StyleManager:
    """Loads stylesheets once and applies them to the application."""

    def __init__(self, styles_dir: Path = STYLES_DIR):
        self.styles_dir = styles_dir
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @lru_cache(maxsize=None)
    def load_style(self, name: str) -> str:
        """Stylesheet text, or "" if styles/<name>.qss is missing or unreadable."""
        path = self.styles_dir / f"{name}.qss"
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            self.logger.warning(f"Stylesheet '{name}' unavailable: {e}")
            return ""

    def apply_app_style(self, app: QApplication, name: str = "main") -> bool:
        stylesheet = self.load_style(name)
        if stylesheet:
            app.setStyleSheet(stylesheet)
            self.logger.debug(f"Stylesheet '{name}' applied")
        return bool(stylesheet)


style_manager = StyleManager()


def apply_style_class(widget: QWidget, class_name: str) -> None:
    """Tag a widget for a QSS class rule and re-polish it."""
    widget.setProperty("class", class_name)
    style = widget.style()
    style.unpolish(widget)
    style.polish(widget)
