"""
Doom Codex: reference browser for DOOM demons and weapons.

A desktop client that reads demon and weapon records from a remote HTTP API
and presents them as home, list and detail screens.
"""

__version__ = "0.1.0"
__author__ = "Doom Codex Contributors"

from .api import DoomApiClient, DemonDetail, WeaponDetail, ApiError
from .navigation import Navigator, Route
from .views import EntityListViewModel, EntityDetailViewModel, ViewScope

__all__ = [
    # Gateway
    "DoomApiClient",
    "DemonDetail",
    "WeaponDetail",
    "ApiError",
    # Navigation
    "Navigator",
    "Route",
    # View models
    "EntityListViewModel",
    "EntityDetailViewModel",
    "ViewScope",
]
