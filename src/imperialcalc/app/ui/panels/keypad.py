from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QGridLayout, QPushButton, QSizePolicy

from imperialcalc.app.ui.panels.base import BasePanel
from imperialcalc.model.state import Token

if TYPE_CHECKING:
    from imperialcalc.app.state import Store

# Static button layout, four buttons per row
BUTTON_LAYOUT: list[list[str]] = [
    [Token.FEET, Token.INCH, Token.SLASH, Token.SETTING],
    ["7", "8", "9", Token.DIVIDE],
    ["4", "5", "6", Token.TIMES],
    ["1", "2", "3", Token.MINUS],
    ["0", Token.DOT, Token.EQUALS, Token.PLUS],
    [Token.UNDO, Token.CLEAR],
]


class KeypadPanel(BasePanel):
    """Button grid. Every button submits its label as a token."""
    settings_requested = Signal()

    def __init__(self, store: Store, parent=None) -> None:
        super().__init__(store, parent)
        self.buttons: dict[str, QPushButton] = {}

        grid = QGridLayout(self)
        grid.setSpacing(8)

        for row, labels in enumerate(BUTTON_LAYOUT):
            for col, label in enumerate(labels):
                button = QPushButton(str(label), self)
                button.setMinimumHeight(48)
                button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
                button.clicked.connect(lambda _=False, t=str(label): self.press(t))
                grid.addWidget(button, row, col)
                self.buttons[str(label)] = button

    def press(self, token: str) -> None:
        if token == Token.SETTING:
            self.settings_requested.emit()
            return
        self.store.submit(token)
