"""
UI-related settings for Doom Codex.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings
    from PySide6.QtWidgets import QWidget


class UISettings:
    """Manages UI-related settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def save_window_geometry(self, widget: "QWidget") -> None:
        """Save window geometry and state."""
        self.settings.setValue("ui/window_geometry", widget.saveGeometry())
        # Only QMainWindow has saveState
        if hasattr(widget, "saveState"):
            self.settings.setValue("ui/window_state", widget.saveState())
        self.settings.sync()

    def restore_window_geometry(self, widget: "QWidget") -> bool:
        """Restore window geometry and state. Returns True if restored."""
        from PySide6.QtCore import QByteArray

        geometry: Any = self.settings.value("ui/window_geometry")
        state: Any = self.settings.value("ui/window_state")

        restored = False
        if geometry:
            if isinstance(geometry, bytes):
                geometry = QByteArray(geometry)
            if isinstance(geometry, QByteArray):
                restored = widget.restoreGeometry(geometry)

        if state and hasattr(widget, "restoreState"):
            if isinstance(state, bytes):
                state = QByteArray(state)
            if isinstance(state, QByteArray):
                widget.restoreState(state)  # type: ignore[attr-defined]

        return restored
