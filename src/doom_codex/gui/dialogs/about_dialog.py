"""
About box for Doom Codex.
"""

from typing import Optional

from PySide6.QtWidgets import QMessageBox, QWidget

from ...resources import get_app_icon


def show_about_dialog(
    version: str,
    base_url: str,
    parent: Optional[QWidget] = None,
) -> None:
    """
    Show the application name, version and the API host in use.

    Args:
        version: Application version string
        base_url: Configured API host
        parent: Parent widget
    """
    box = QMessageBox(parent)
    box.setWindowTitle("About Doom Codex")
    box.setIconPixmap(get_app_icon().pixmap(64, 64))
    box.setText(
        f"<h3>Doom Codex {version}</h3>"
        "<p>Reference browser for DOOM demons and weapons.</p>"
        f"<p>API host: <code>{base_url}</code></p>"
    )
    box.setStandardButtons(QMessageBox.StandardButton.Ok)
    box.exec()
