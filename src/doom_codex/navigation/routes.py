"""
Route names and parsing for screen navigation.

Routes are plain strings such as "home", "demons" or "demonDetail/imp".
A detail key is everything after the first "/", so keys may contain "/".
"""

from dataclasses import dataclass
from typing import Optional

HOME = "home"
DEMONS = "demons"
DEMON_DETAIL = "demonDetail"
WEAPONS = "weapons"
WEAPON_DETAIL = "weaponDetail"

SIMPLE_ROUTES = frozenset({HOME, DEMONS, WEAPONS})
DETAIL_ROUTES = frozenset({DEMON_DETAIL, WEAPON_DETAIL})


class NavigationError(ValueError):
    """Raised for unknown or malformed routes."""
    pass


@dataclass(frozen=True)
class Route:
    """A navigation target: a route name plus the key for detail routes."""

    name: str
    key: Optional[str] = None

    def __post_init__(self) -> None:
        if self.name in SIMPLE_ROUTES:
            if self.key is not None:
                raise NavigationError(f"Route '{self.name}' does not take a key")
        elif self.name in DETAIL_ROUTES:
            if not self.key:
                raise NavigationError(f"Route '{self.name}' requires a key")
        else:
            raise NavigationError(f"Unknown route: {self.name!r}")

    @classmethod
    def parse(cls, text: str) -> "Route":
        """Parse "name" or "name/key" into a Route."""
        name, sep, key = text.partition("/")
        return cls(name, key if sep else None)

    def require_key(self) -> str:
        """Key of a detail route; NavigationError for routes without one."""
        if self.key is None:
            raise NavigationError(f"Route '{self.name}' has no key")
        return self.key

    @property
    def is_detail(self) -> bool:
        return self.name in DETAIL_ROUTES

    def __str__(self) -> str:
        return f"{self.name}/{self.key}" if self.key is not None else self.name
