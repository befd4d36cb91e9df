"""
Dialog components for Doom Codex GUI.
"""

from .about_dialog import show_about_dialog
from .api_settings_dialog import ApiSettingsDialog

__all__ = [
    "show_about_dialog",
    "ApiSettingsDialog",
]
