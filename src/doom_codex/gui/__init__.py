"""
PySide6 user interface for Doom Codex.
"""

from .main_window import MainWindow

__all__ = ["MainWindow"]
