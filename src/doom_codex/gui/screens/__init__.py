"""
Screens mounted by the main window's navigator.
"""

from .base import BaseScreen
from .entity_detail import EntityDetailScreen
from .entity_list import EntityListScreen
from .home import HomeScreen

__all__ = [
    "BaseScreen",
    "HomeScreen",
    "EntityListScreen",
    "EntityDetailScreen",
]
