from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QSettings, Signal

from imperialcalc.config import (
    DEFAULT_FRACTION_RESOLUTION,
    FRACTION_RESOLUTIONS,
    SETTINGS_FRACTION_RESOLUTION,
)
from imperialcalc.model.state import CalculatorSession

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store with signals for display/settings sync."""
    display_changed = Signal(str, str)
    resolution_changed = Signal(int)

    def __init__(self, settings: QSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else QSettings()
        self.session = CalculatorSession(fraction_resolution=self._load_resolution())

    def _load_resolution(self) -> int:
        raw = self._settings.value(SETTINGS_FRACTION_RESOLUTION, DEFAULT_FRACTION_RESOLUTION)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            value = None
        if value not in FRACTION_RESOLUTIONS:
            logger.warning(f"Invalid stored fraction resolution {raw!r}, using 1/{DEFAULT_FRACTION_RESOLUTION}.")
            return DEFAULT_FRACTION_RESOLUTION
        return value

    # ---------- Reads ----------

    def primary(self) -> str:
        return self.session.current_primary()

    def secondary(self) -> str:
        return self.session.current_secondary()

    def millimeters(self) -> str:
        return self.session.millimeter_conversion()

    def sheets(self) -> str:
        return self.session.sheets_count_display()

    def fraction_resolution(self) -> int:
        return self.session.fraction_resolution

    # ---------- Writes ----------

    def submit(self, token: str) -> None:
        if self.session.submit(token):
            self.display_changed.emit(self.primary(), self.secondary())

    def set_fraction_resolution(self, value: int) -> None:
        if value == self.session.fraction_resolution:
            return
        self.session.set_fraction_resolution(value)
        self._settings.setValue(SETTINGS_FRACTION_RESOLUTION, value)
        self.resolution_changed.emit(value)
