"""
Resources for Doom Codex.

Provides helpers for the application icon and section icons.
"""

from functools import lru_cache

import qtawesome as qta  # type: ignore
from PySide6.QtGui import QIcon

ICON_COLOR = "#d32f2f"

SECTION_ICONS = {
    "demons": "fa5s.skull",
    "weapons": "fa5s.crosshairs",
}


@lru_cache(maxsize=1)
def get_app_icon() -> QIcon:
    """Return the shared application icon."""
    return QIcon(qta.icon("fa5s.skull", color=ICON_COLOR))  # type: ignore[arg-type]


def get_icon(name: str, color: str = ICON_COLOR) -> QIcon:
    """Return a Font Awesome icon by qtawesome name (e.g. "fa5s.home")."""
    return QIcon(qta.icon(name, color=color))  # type: ignore[arg-type]
