"""Widget tests for the list and detail screens (offscreen platform)."""

from typing import List

import pytest

from doom_codex.api import ApiRequestError, WeaponDetail
from doom_codex.navigation import Route
from doom_codex.views import (
    DEMONS,
    WEAPONS,
    EntityDetailViewModel,
    EntityListViewModel,
    ViewScope,
)

from conftest import PLASMA_RIFLE_JSON, FakeGateway, ManualExecutor, make_demon

pytestmark = pytest.mark.usefixtures("qapp")


def visible_texts(screen) -> List[str]:
    widget = screen.list_widget
    return [
        widget.item(i).text()
        for i in range(widget.count())
        if not widget.item(i).isHidden()
    ]


class TestEntityListScreen:
    """Rendering of EntityListScreen."""

    def test_failed_list_shows_one_literal_item(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test a failed list renders exactly one non-selectable message item."""
        from PySide6.QtCore import Qt
        from doom_codex.gui.screens import EntityListScreen

        vm = EntityListViewModel(
            DEMONS, FakeGateway(demons=ApiRequestError("down")), scope, navigate=lambda r: None
        )
        screen = EntityListScreen(vm)
        screen.start()
        executor.run_all()

        assert screen.list_widget.count() == 1
        item = screen.list_widget.item(0)
        assert item.text() == "Failed to load demons"
        assert not item.flags() & Qt.ItemFlag.ItemIsSelectable
        screen.dispose()

    def test_rows_render_in_list_order(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test rows appear in list order when details arrive out of order."""
        from doom_codex.gui.screens import EntityListScreen

        gateway = FakeGateway(
            demons=["Zombieman", "Imp"],
            details={"Zombieman": make_demon("Zombieman"), "Imp": make_demon("Imp")},
        )
        screen = EntityListScreen(EntityListViewModel(DEMONS, gateway, scope, navigate=lambda r: None))
        screen.start()
        executor.run()  # list

        assert screen.list_widget.count() == 2
        assert visible_texts(screen) == []

        executor.run(1)  # Imp first
        assert visible_texts(screen) == ["Imp"]

        executor.run(0)
        assert visible_texts(screen) == ["Zombieman", "Imp"]
        screen.dispose()

    def test_failed_row_is_shown_disabled(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test a row whose detail failed is shown as unavailable."""
        from PySide6.QtCore import Qt
        from doom_codex.gui.screens import EntityListScreen

        gateway = FakeGateway(demons=["Imp", "Icon"], details={"Imp": make_demon("Imp")})
        screen = EntityListScreen(EntityListViewModel(DEMONS, gateway, scope, navigate=lambda r: None))
        screen.start()
        executor.run_all()

        assert visible_texts(screen) == ["Imp", "Icon (unavailable)"]
        assert screen.list_widget.item(1).flags() == Qt.ItemFlag.NoItemFlags
        screen.dispose()

    def test_click_and_activate_navigate_once(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test itemClicked plus itemActivated for one click opens one detail."""
        from doom_codex.gui.screens import EntityListScreen

        navigated: List[Route] = []

        def navigate(route: Route) -> None:
            navigated.append(route)
            screen.dispose()

        gateway = FakeGateway(demons=["imp"], details={"imp": make_demon("Imp")})
        screen = EntityListScreen(EntityListViewModel(DEMONS, gateway, scope, navigate=navigate))
        screen.start()
        executor.run_all()

        item = screen.list_widget.item(0)
        screen.list_widget.itemClicked.emit(item)
        screen.list_widget.itemActivated.emit(item)

        assert navigated == [Route("demonDetail", "imp")]


class TestEntityDetailScreen:
    """Rendering of EntityDetailScreen."""

    def test_plasma_rifle_form(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test the plasma rifle renders six labeled rows with exact values."""
        from PySide6.QtWidgets import QFormLayout
        from doom_codex.gui.screens import EntityDetailScreen

        gateway = FakeGateway(details={"plasma_rifle": WeaponDetail(**PLASMA_RIFLE_JSON)})
        screen = EntityDetailScreen(EntityDetailViewModel(WEAPONS, "plasma_rifle", gateway, scope))
        screen.start()
        executor.run_all()

        form = screen.form
        rows = [
            (
                form.itemAt(i, QFormLayout.ItemRole.LabelRole).widget().text(),
                form.itemAt(i, QFormLayout.ItemRole.FieldRole).widget().text(),
            )
            for i in range(form.rowCount())
        ]
        assert rows == [
            ("Name:", "Plasma Rifle"),
            ("Damage:", "20"),
            ("Fire Mode:", "Auto"),
            ("Location:", "UAC Facility"),
            ("Weapon Type:", "Energy"),
            ("Ammo Type:", "Cells"),
        ]
        assert screen.title_label.text() == "Plasma Rifle"
        assert screen.status_label.isHidden()
        screen.dispose()

    def test_failure_shows_reason(self, executor: ManualExecutor, scope: ViewScope) -> None:
        """Test a failed fetch shows its reason and no form rows."""
        from doom_codex.gui.screens import EntityDetailScreen

        screen = EntityDetailScreen(
            EntityDetailViewModel(WEAPONS, "bfg_9000", FakeGateway(), scope)
        )
        screen.start()
        executor.run_all()

        assert screen.form.rowCount() == 0
        assert screen.status_label.text().startswith("Failed to load 'bfg_9000'")
        screen.dispose()
