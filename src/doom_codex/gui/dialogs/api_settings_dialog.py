"""
API settings dialog for Doom Codex.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from ...resources.style_manager import apply_style_class
from ...settings import AppSettings, ConfigError
from ...settings.api import check_base_url
from ...views import KeyPolicy

KEY_POLICY_LABELS = {
    KeyPolicy.DISPLAY_NAME: "Derived from display name",
    KeyPolicy.SUMMARY: "List key as returned by the API",
}


class ApiSettingsDialog(QDialog):
    """Dialog for configuring the API host and request behavior."""

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.setWindowTitle("API Settings")
        self.setWindowFlag(Qt.WindowType.WindowContextHelpButtonHint, False)
        self.setModal(True)
        self.settings = settings

        self._setup_ui()
        self._load_settings()

    def _setup_ui(self):
        """Setup the user interface."""
        main_vbox = QVBoxLayout(self)
        form_layout = QFormLayout()

        self.base_url_edit = QLineEdit()
        self.base_url_edit.setPlaceholderText("http://localhost:8000")
        self.base_url_edit.setMinimumWidth(280)
        form_layout.addRow("API host:", self.base_url_edit)

        self.timeout_spinbox = QDoubleSpinBox()
        self.timeout_spinbox.setRange(0.0, 600.0)
        self.timeout_spinbox.setDecimals(1)
        self.timeout_spinbox.setSuffix(" s")
        self.timeout_spinbox.setSpecialValueText("No timeout")
        form_layout.addRow("Request timeout:", self.timeout_spinbox)

        self.workers_spinbox = QSpinBox()
        self.workers_spinbox.setRange(1, 64)
        self.workers_spinbox.setToolTip("Maximum number of requests in flight")
        form_layout.addRow("Parallel requests:", self.workers_spinbox)

        self.key_policy_combo = QComboBox()
        for policy, label in KEY_POLICY_LABELS.items():
            self.key_policy_combo.addItem(label, policy.value)
        form_layout.addRow("Detail key:", self.key_policy_combo)

        info_label = QLabel(
            "Changes apply immediately; the current screen is reloaded."
        )
        apply_style_class(info_label, "info")
        info_label.setWordWrap(True)
        form_layout.addRow(info_label)

        main_vbox.addLayout(form_layout)

        button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        button_box.accepted.connect(self._save_and_accept)
        button_box.rejected.connect(self.reject)
        main_vbox.addWidget(button_box)

    def _load_settings(self):
        """Load current settings into UI."""
        api = self.settings.api
        self.base_url_edit.setText(api.base_url)
        self.timeout_spinbox.setValue(api.timeout)
        self.workers_spinbox.setValue(api.max_workers)
        index = self.key_policy_combo.findData(api.key_policy.value)
        self.key_policy_combo.setCurrentIndex(max(index, 0))

    def _save_and_accept(self):
        """Validate, save settings and close dialog."""
        try:
            base_url = check_base_url(self.base_url_edit.text())
        except ConfigError as e:
            self.logger.warning(str(e))
            QMessageBox.warning(self, "Invalid API host", str(e))
            return

        api = self.settings.api
        api.base_url = base_url
        api.timeout = self.timeout_spinbox.value()
        api.max_workers = self.workers_spinbox.value()
        api.key_policy = KeyPolicy(self.key_policy_combo.currentData())
        self.logger.info(f"API settings saved: {base_url}")
        self.accept()
