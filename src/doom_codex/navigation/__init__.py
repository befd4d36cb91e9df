"""
Navigation between the home, list and detail screens.
"""

from .navigator import Navigator, Screen
from .routes import (
    DEMON_DETAIL,
    DEMONS,
    HOME,
    WEAPON_DETAIL,
    WEAPONS,
    NavigationError,
    Route,
)

__all__ = [
    "Navigator",
    "Screen",
    "Route",
    "NavigationError",
    "HOME",
    "DEMONS",
    "DEMON_DETAIL",
    "WEAPONS",
    "WEAPON_DETAIL",
]
