"""
Data models for DOOM API responses.

Detail records are immutable and always fully populated: decoding either
produces every field or raises ApiDecodeError. All values are opaque
display strings and are passed through verbatim.
"""

from dataclasses import dataclass, fields
from typing import Any, ClassVar, List, Tuple, Type, TypeAlias, TypeVar

from .errors import ApiDecodeError

EntitySummary: TypeAlias = str
"""Key of a demon or weapon as returned by the list endpoints."""

LabeledRow: TypeAlias = Tuple[str, str]
"""A (label, value) pair shown on detail screens."""

R = TypeVar("R")


def decode_summaries(payload: Any) -> List[EntitySummary]:
    """Decode a list endpoint response into summary keys."""
    if not isinstance(payload, list):
        raise ApiDecodeError(
            f"Expected a JSON array of keys, got {type(payload).__name__}"
        )
    for index, item in enumerate(payload):
        if not isinstance(item, str):
            raise ApiDecodeError(
                f"Expected string key at index {index}, got {type(item).__name__}"
            )
    return list(payload)


def decode_record(record_type: Type[R], payload: Any) -> R:
    """Decode a JSON object into a detail record.

    Field names are matched case-sensitively. Missing fields and non-string
    values fail the decode; unknown extra fields are ignored.
    """
    if not isinstance(payload, dict):
        raise ApiDecodeError(
            f"Expected a JSON object for {record_type.__name__}, "
            f"got {type(payload).__name__}"
        )

    values = {}
    for field in fields(record_type):
        if field.name not in payload:
            raise ApiDecodeError(
                f"{record_type.__name__} is missing field '{field.name}'"
            )
        value = payload[field.name]
        if not isinstance(value, str):
            raise ApiDecodeError(
                f"{record_type.__name__}.{field.name} must be a string, "
                f"got {type(value).__name__}"
            )
        values[field.name] = value

    return record_type(**values)


@dataclass(frozen=True)
class DemonDetail:
    """Full record for one demon."""

    name: str
    description: str
    hp: str
    rank: str
    speed: str
    image: str

    LABELS: ClassVar[Tuple[LabeledRow, ...]] = (
        ("Name:", "name"),
        ("Health Points:", "hp"),
        ("Speed:", "speed"),
        ("Description:", "description"),
        ("Rank:", "rank"),
    )

    @classmethod
    def from_json(cls, payload: Any) -> "DemonDetail":
        return decode_record(cls, payload)

    def labeled_rows(self) -> List[LabeledRow]:
        """Display rows in screen order (the image is not a row)."""
        return [(label, getattr(self, attr)) for label, attr in self.LABELS]


@dataclass(frozen=True)
class WeaponDetail:
    """Full record for one weapon."""

    name: str
    damage: str
    fire_mode: str
    location: str
    weapon_type: str
    ammo_type: str
    image: str

    LABELS: ClassVar[Tuple[LabeledRow, ...]] = (
        ("Name:", "name"),
        ("Damage:", "damage"),
        ("Fire Mode:", "fire_mode"),
        ("Location:", "location"),
        ("Weapon Type:", "weapon_type"),
        ("Ammo Type:", "ammo_type"),
    )

    @classmethod
    def from_json(cls, payload: Any) -> "WeaponDetail":
        return decode_record(cls, payload)

    def labeled_rows(self) -> List[LabeledRow]:
        """Display rows in screen order (the image is not a row)."""
        return [(label, getattr(self, attr)) for label, attr in self.LABELS]
