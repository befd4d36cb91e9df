"""Shared fixtures for Doom Codex tests."""

import os
from concurrent.futures import Executor, Future
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import pytest

from doom_codex.api import ApiRequestError, DemonDetail, WeaponDetail
from doom_codex.views import ViewScope

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ManualExecutor(Executor):
    """Executor that runs submitted calls only when the test asks it to."""

    def __init__(self) -> None:
        self.pending: List[Tuple[Future, Callable[..., Any], tuple, dict]] = []

    def submit(self, fn, /, *args, **kwargs) -> Future:  # type: ignore[override]
        future: Future = Future()
        self.pending.append((future, fn, args, kwargs))
        return future

    def run(self, index: int = 0) -> None:
        """Run one pending call (by queue position)."""
        future, fn, args, kwargs = self.pending.pop(index)
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = fn(*args, **kwargs)
        except BaseException as e:
            future.set_exception(e)
        else:
            future.set_result(result)

    def run_all(self) -> None:
        while self.pending:
            self.run(0)


Response = Union[Any, Exception]


class FakeGateway:
    """In-memory gateway that records every call."""

    def __init__(
        self,
        demons: Response = None,
        weapons: Response = None,
        details: Optional[Dict[str, Response]] = None,
    ) -> None:
        self.demons = demons if demons is not None else []
        self.weapons = weapons if weapons is not None else []
        self.details = details or {}
        self.calls: List[str] = []

    @staticmethod
    def _answer(value: Response) -> Any:
        if isinstance(value, Exception):
            raise value
        return value

    def _detail(self, path: str, key: str) -> Any:
        self.calls.append(f"{path}/{key}")
        if key not in self.details:
            raise ApiRequestError(f"GET {path}/{key} returned 404", status_code=404)
        return self._answer(self.details[key])

    def list_demons(self) -> List[str]:
        self.calls.append("/demons")
        return self._answer(self.demons)

    def get_demon_detail(self, key: str) -> DemonDetail:
        return self._detail("/demons", key)

    def list_weapons(self) -> List[str]:
        self.calls.append("/weapons")
        return self._answer(self.weapons)

    def get_weapon_detail(self, key: str) -> WeaponDetail:
        return self._detail("/weapons", key)


def make_demon(name: str, **overrides: str) -> DemonDetail:
    fields = {
        "name": name,
        "description": f"{name} description",
        "hp": "20",
        "rank": "Fodder",
        "speed": "8",
        "image": f"http://img.example/{name.lower().replace(' ', '_')}.png",
    }
    fields.update(overrides)
    return DemonDetail(**fields)


PLASMA_RIFLE_JSON = {
    "name": "Plasma Rifle",
    "damage": "20",
    "fire_mode": "Auto",
    "location": "UAC Facility",
    "weapon_type": "Energy",
    "ammo_type": "Cells",
    "image": "http://img.example/plasma.png",
}


@pytest.fixture
def executor() -> ManualExecutor:
    return ManualExecutor()


@pytest.fixture
def scope(executor: ManualExecutor) -> ViewScope:
    return ViewScope(executor, name="test")


@pytest.fixture
def qsettings_store(tmp_path):
    """INI-backed QSettings so tests never touch the user's settings."""
    from PySide6.QtCore import QSettings

    return QSettings(str(tmp_path / "doom_codex.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def app_settings(qsettings_store):
    from doom_codex.settings import AppSettings

    return AppSettings(profile="test", store=qsettings_store)


@pytest.fixture(scope="session")
def qapp():
    """The QApplication shared by widget tests."""
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
