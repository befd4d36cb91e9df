"""
Detail screen for a single demon or weapon.
"""

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QLabel, QWidget

from ...resources.style_manager import apply_style_class
from ...views import EntityDetailViewModel, Failed, Loaded
from .base import BaseScreen


class EntityDetailScreen(BaseScreen):
    """Shows every display field of one record as a labeled row."""

    def __init__(self, view_model: EntityDetailViewModel, parent: Optional[QWidget] = None):
        super().__init__(view_model.key, scope=view_model.scope, parent=parent)
        self.view_model = view_model
        self.view_model.on_change = self.render
        self.setup_ui()
        self.render()

    def setup_ui(self) -> None:
        self.title_label = self.make_title_label()
        self.main_layout.addWidget(self.title_label)

        self.status_label = QLabel("Loading...")
        self.status_label.setWordWrap(True)
        apply_style_class(self.status_label, "placeholder")
        self.main_layout.addWidget(self.status_label)

        self.form = QFormLayout()
        self.form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)
        self.form.setVerticalSpacing(10)
        self.main_layout.addLayout(self.form)
        self.main_layout.addStretch(1)

    def start(self) -> None:
        self.view_model.start()

    def render(self) -> None:
        state = self.view_model.state

        if isinstance(state, Failed):
            self.status_label.setText(state.reason)
            apply_style_class(self.status_label, "error")
            self.status_label.show()
            return

        if not isinstance(state, Loaded):
            self.status_label.show()
            return

        self.status_label.hide()
        self.title_label.setText(state.data.name)
        while self.form.rowCount():
            self.form.removeRow(0)
        for label, value in self.view_model.rows():
            name_label = QLabel(label)
            apply_style_class(name_label, "field-label")
            value_label = QLabel(value)
            value_label.setWordWrap(True)
            value_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            self.form.addRow(name_label, value_label)
