"""
Main window: display panel on top, keypad below, settings dialog on demand.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QDialog, QMainWindow, QVBoxLayout, QWidget

from imperialcalc.app.application import VISIBLE_APP_NAME
from imperialcalc.app.state import Store
from imperialcalc.app.ui.panels.display import DisplayPanel
from imperialcalc.app.ui.panels.keypad import KeypadPanel
from imperialcalc.app.ui.settings_dialog import SettingsDialog
from imperialcalc.model.state import Token

# Physical keys without a printable character
KEY_TOKENS: dict[int, str] = {
    Qt.Key.Key_Return: Token.EQUALS,
    Qt.Key.Key_Enter: Token.EQUALS,
    Qt.Key.Key_Escape: Token.CLEAR,
    Qt.Key.Key_Delete: Token.CLEAR,
    Qt.Key.Key_Backspace: Token.UNDO,
}

# Typed characters
TEXT_TOKENS: dict[str, str] = {
    "'": Token.FEET,
    '"': Token.INCH,
    "/": Token.SLASH,
    ".": Token.DOT,
    "+": Token.PLUS,
    "-": Token.MINUS,
    "x": Token.TIMES,
    "*": Token.TIMES,
    "÷": Token.DIVIDE,
    ":": Token.DIVIDE,
    "=": Token.EQUALS,
}


def token_for_key(key: int, text: str, modifiers: Qt.KeyboardModifier) -> str | None:
    """Map a key press to a keypad token, or None if the key means nothing to the calculator."""
    if key == Qt.Key.Key_Z and modifiers & Qt.KeyboardModifier.ControlModifier:
        return Token.UNDO
    if key in KEY_TOKENS:
        return KEY_TOKENS[key]
    if len(text) == 1 and text.isdigit():
        return text
    return TEXT_TOKENS.get(text)


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None):
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(420, 720)

        # Global store
        self.store = store if store is not None else Store()

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(12, 12, 12, 12)
        v.setSpacing(24)

        self.display = DisplayPanel(self.store, parent=central)
        self.keypad = KeypadPanel(self.store, parent=central)
        v.addWidget(self.display, 0)
        v.addWidget(self.keypad, 1)

        self.setCentralWidget(central)

        self.keypad.settings_requested.connect(self.open_settings)

    def open_settings(self) -> None:
        dlg = SettingsDialog(self.store.fraction_resolution(), parent=self)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            self.store.set_fraction_resolution(dlg.resolution())

    def keyPressEvent(self, event: QKeyEvent) -> None:
        token = token_for_key(event.key(), event.text(), event.modifiers())
        if token is None:
            super().keyPressEvent(event)
            return
        self.store.submit(token)
