"""
Typed reads from a QSettings store.

QSettings hands back whatever the backend stored: native types from the
registry or plist, strings from INI files. These helpers coerce to the
requested type and fall back to the default when the value is missing or
unreadable.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

TRUE_STRINGS = ("true", "1", "yes", "on")


def read_str(store: "QSettings", key: str, default: str = "") -> str:
    value = store.value(key, default)
    return default if value is None else str(value)


def read_bool(store: "QSettings", key: str, default: bool = False) -> bool:
    value = store.value(key, default)
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def read_float(store: "QSettings", key: str, default: float = 0.0) -> float:
    try:
        return float(read_str(store, key, str(default)))
    except ValueError:
        return default


def read_int(store: "QSettings", key: str, default: int = 0) -> int:
    try:
        return int(read_str(store, key, str(default)))
    except ValueError:
        return default
