"""
Entity kinds browsed by the application and key handling.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, TypeAlias

from ..api import DemonDetail, EntitySummary, Gateway, WeaponDetail
from ..navigation import routes

DetailRecord: TypeAlias = DemonDetail | WeaponDetail


class KeyPolicy(Enum):
    """Which key a list row passes to the detail route."""

    DISPLAY_NAME = "display_name"  # normalized from the fetched detail name
    SUMMARY = "summary"  # the key the row was fetched with


def normalize_key(name: str) -> str:
    """Derive a lookup key from a display name.

    >>> normalize_key("Pain Elemental")
    'pain_elemental'
    """
    return name.lower().replace(" ", "_")


@dataclass(frozen=True)
class EntityKind:
    """Describes one browsable collection and how to fetch it."""

    collection: str
    """List route name and API collection (e.g. "demons")."""

    detail_route: str
    """Detail route prefix (e.g. "demonDetail")."""

    title: str
    failure_message: str
    fetch_list: Callable[[Gateway], List[EntitySummary]]
    fetch_detail: Callable[[Gateway, str], DetailRecord]


DEMONS = EntityKind(
    collection=routes.DEMONS,
    detail_route=routes.DEMON_DETAIL,
    title="Demons",
    failure_message="Failed to load demons",
    fetch_list=lambda gateway: gateway.list_demons(),
    fetch_detail=lambda gateway, key: gateway.get_demon_detail(key),
)

WEAPONS = EntityKind(
    collection=routes.WEAPONS,
    detail_route=routes.WEAPON_DETAIL,
    title="Weapons",
    failure_message="Failed to load weapons",
    fetch_list=lambda gateway: gateway.list_weapons(),
    fetch_detail=lambda gateway, key: gateway.get_weapon_detail(key),
)

ENTITY_KINDS = (DEMONS, WEAPONS)


def kind_for_route(route_name: str) -> EntityKind:
    """Return the entity kind whose list or detail route matches."""
    for kind in ENTITY_KINDS:
        if route_name in (kind.collection, kind.detail_route):
            return kind
    raise KeyError(route_name)
