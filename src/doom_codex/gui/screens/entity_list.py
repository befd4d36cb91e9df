"""
List screen for demons or weapons.

Renders an EntityListViewModel. One list item is created per summary key
so rows keep their list position; an item stays hidden until its detail
fetch settles.
"""

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QListWidget, QListWidgetItem, QWidget

from ...resources.style_manager import apply_style_class
from ...views import EntityListViewModel, Failed, Loaded, Loading
from .base import BaseScreen

ROW_INDEX_ROLE = Qt.ItemDataRole.UserRole


class EntityListScreen(BaseScreen):
    """Shows the summary list of one entity kind."""

    def __init__(self, view_model: EntityListViewModel, parent: Optional[QWidget] = None):
        super().__init__(view_model.kind.title, scope=view_model.scope, parent=parent)
        self.view_model = view_model
        self.view_model.on_change = self.render
        self.setup_ui()
        self.render()

    def setup_ui(self) -> None:
        self.main_layout.addWidget(self.make_title_label())

        self.placeholder = QLabel("Loading...")
        apply_style_class(self.placeholder, "placeholder")
        self.main_layout.addWidget(self.placeholder)

        self.list_widget = QListWidget()
        self.list_widget.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.list_widget.itemClicked.connect(self.on_item_activated)
        self.list_widget.itemActivated.connect(self.on_item_activated)
        self.main_layout.addWidget(self.list_widget, 1)

    def start(self) -> None:
        self.view_model.start()

    def render(self) -> None:
        """Re-render from the view model state."""
        state = self.view_model.state

        if isinstance(state, Loading):
            self.placeholder.show()
            self.list_widget.hide()
            return

        self.placeholder.hide()
        self.list_widget.show()

        if isinstance(state, Failed):
            self.list_widget.clear()
            item = QListWidgetItem(state.reason)
            item.setFlags(Qt.ItemFlag.ItemIsEnabled)
            self.list_widget.addItem(item)
            return

        if isinstance(state, Loaded):
            self._render_rows()

    def _render_rows(self) -> None:
        rows = self.view_model.rows
        if self.list_widget.count() != len(rows):
            self.list_widget.clear()
            for row in rows:
                item = QListWidgetItem(row.key)
                item.setData(ROW_INDEX_ROLE, row.index)
                item.setToolTip(row.key)
                self.list_widget.addItem(item)
                item.setHidden(True)

        for row in rows:
            item = self.list_widget.item(row.index)
            if isinstance(row.state, Loaded):
                item.setText(row.state.data.name)
                item.setFlags(Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable)
                item.setHidden(False)
            elif isinstance(row.state, Failed):
                item.setText(f"{row.key} (unavailable)")
                item.setToolTip(row.state.reason)
                item.setFlags(Qt.ItemFlag.NoItemFlags)
                item.setHidden(False)
            else:
                item.setHidden(True)

    def on_item_activated(self, item: QListWidgetItem) -> None:
        # A single click may emit both itemClicked and itemActivated; select()
        # ignores the second one because navigating closed this view's scope.
        index = item.data(ROW_INDEX_ROLE)
        if index is None:
            return
        self.view_model.select(int(index))
