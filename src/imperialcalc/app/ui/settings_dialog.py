from __future__ import annotations

from PySide6.QtWidgets import QComboBox, QDialog, QDialogButtonBox, QFormLayout, QWidget

from imperialcalc.config import FRACTION_RESOLUTIONS


class SettingsDialog(QDialog):
    """Fraction resolution picker."""
    def __init__(self, resolution: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(self.tr("Settings"))

        self.combo_resolution = QComboBox(self)
        for value in FRACTION_RESOLUTIONS:
            self.combo_resolution.addItem(f"1/{value}", value)
        self.combo_resolution.setCurrentIndex(self.combo_resolution.findData(resolution))

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel, parent=self
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        form = QFormLayout(self)
        form.addRow(self.tr("Fraction resolution"), self.combo_resolution)
        form.addRow(buttons)

    def resolution(self) -> int:
        return int(self.combo_resolution.currentData())
