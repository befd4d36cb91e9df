"""Tests for the detail screen state machine."""

from doom_codex.api import ApiDecodeError, WeaponDetail
from doom_codex.views import (
    DEMONS,
    WEAPONS,
    EntityDetailViewModel,
    Failed,
    Loaded,
    Loading,
    ViewScope,
)

from conftest import PLASMA_RIFLE_JSON, FakeGateway, ManualExecutor, make_demon


def weapon_gateway() -> FakeGateway:
    return FakeGateway(details={"plasma_rifle": WeaponDetail(**PLASMA_RIFLE_JSON)})


class TestDetailFetch:
    """Single-record fetch and rendering."""

    def test_loading_until_fetch_completes(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test the view is Loading with no rows before the fetch completes."""
        vm = EntityDetailViewModel(WEAPONS, "plasma_rifle", weapon_gateway(), scope)
        vm.start()

        assert isinstance(vm.state, Loading)
        assert vm.rows() == []
        assert vm.detail is None

    def test_plasma_rifle_renders_six_rows(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test a weapon record yields its six labeled rows in order."""
        gateway = weapon_gateway()
        vm = EntityDetailViewModel(WEAPONS, "plasma_rifle", gateway, scope)
        vm.start()
        executor.run_all()

        assert gateway.calls == ["/weapons/plasma_rifle"]
        assert isinstance(vm.state, Loaded)
        assert [label for label, _ in vm.rows()] == [
            "Name:",
            "Damage:",
            "Fire Mode:",
            "Location:",
            "Weapon Type:",
            "Ammo Type:",
        ]
        assert vm.rows()[0] == ("Name:", "Plasma Rifle")

    def test_demon_detail_fetches_demon_endpoint(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test demon detail views fetch from /demons."""
        gateway = FakeGateway(details={"mancubus": make_demon("Mancubus", hp="600")})
        vm = EntityDetailViewModel(DEMONS, "mancubus", gateway, scope)
        vm.start()
        executor.run_all()

        assert gateway.calls == ["/demons/mancubus"]
        assert ("Health Points:", "600") in vm.rows()

    def test_on_change_called_once_per_result(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test the screen is notified once per fetch outcome."""
        changes = []
        vm = EntityDetailViewModel(
            WEAPONS, "plasma_rifle", weapon_gateway(), scope, on_change=lambda: changes.append(1)
        )
        vm.start()
        executor.run_all()
        assert changes == [1]


class TestDetailFailure:
    """Failures become a Failed state with a readable reason."""

    def test_missing_record(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test a 404 becomes Failed with the key in the reason."""
        vm = EntityDetailViewModel(WEAPONS, "bfg_9000", weapon_gateway(), scope)
        vm.start()
        executor.run_all()

        assert isinstance(vm.state, Failed)
        assert vm.state.reason.startswith("Failed to load 'bfg_9000'")
        assert vm.rows() == []

    def test_decode_failure(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test a decode error becomes Failed with its message."""
        gateway = FakeGateway(details={"imp": ApiDecodeError("Missing field 'hp'")})
        vm = EntityDetailViewModel(DEMONS, "imp", gateway, scope)
        vm.start()
        executor.run_all()

        assert vm.state == Failed("Failed to load 'imp': Missing field 'hp'")

    def test_result_after_close_is_dropped(self, executor: ManualExecutor) -> None:
        """Test a result delivered after close leaves the view untouched."""
        queued = []
        scope = ViewScope(executor, dispatch=queued.append)
        vm = EntityDetailViewModel(WEAPONS, "plasma_rifle", weapon_gateway(), scope)
        vm.start()
        executor.run_all()

        scope.close()
        for deliver in queued:
            deliver()

        assert isinstance(vm.state, Loading)


class TestRemount:
    """Each mount fetches again; nothing is cached between mounts."""

    def test_remount_refetches_with_identical_rows(self, executor: ManualExecutor) -> None:
        """Test a second mount fetches again and converges to the same rows."""
        gateway = weapon_gateway()

        first = EntityDetailViewModel(WEAPONS, "plasma_rifle", gateway, ViewScope(executor))
        first.start()
        executor.run_all()

        second = EntityDetailViewModel(WEAPONS, "plasma_rifle", gateway, ViewScope(executor))
        second.start()
        executor.run_all()

        assert gateway.calls == ["/weapons/plasma_rifle", "/weapons/plasma_rifle"]
        assert first.rows() == second.rows()
