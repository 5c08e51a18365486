from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout

from imperialcalc.app.ui.panels.base import BasePanel

if TYPE_CHECKING:
    from imperialcalc.app.state import Store


class DisplayPanel(BasePanel):
    """
    The four display rows: working expression, primary line, metric
    equivalent and sheet count.
    """
    def __init__(self, store: Store, parent=None) -> None:
        super().__init__(store, parent)

        font = QFont("monospace")
        font.setStyleHint(QFont.StyleHint.Monospace)
        font.setPointSize(20)

        layout = QVBoxLayout(self)
        layout.setSpacing(0)

        self.secondary_label = self._add_row(layout, font)
        self.primary_label = self._add_row(layout, font)
        self.metric_label = self._add_row(layout, font)
        self.sheets_label = self._add_row(layout, font, separator=False)

        self.store.display_changed.connect(lambda *_: self.refresh())
        self.store.resolution_changed.connect(lambda *_: self.refresh())
        self.refresh()

    def _add_row(self, layout: QVBoxLayout, font: QFont, separator: bool = True) -> QLabel:
        label = QLabel(self)
        label.setFont(font)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setMinimumHeight(48)
        layout.addWidget(label)

        if separator:
            line = QFrame(self)
            line.setFrameShape(QFrame.Shape.HLine)
            line.setFrameShadow(QFrame.Shadow.Sunken)
            layout.addWidget(line)
        return label

    def refresh(self) -> None:
        self.secondary_label.setText(self.store.secondary())
        self.primary_label.setText(self.store.primary())
        self.metric_label.setText(self.store.millimeters())
        self.sheets_label.setText(self.store.sheets())
