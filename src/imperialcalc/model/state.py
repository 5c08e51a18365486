"""
Calculator Session (Data Model)
===============================
This module defines the central data structure for the running calculator.

Why is this file needed?
------------------------
1. State Management: It holds the expression being typed, the secondary
   (working) line, the undo history and the fraction resolution in one place.
2. Single entry point: Views only call `submit(token)` and read the display
   lines; every validation and evaluation rule lives behind it.
3. Decoupling: It has no knowledge of Qt, so it can be driven by tests or
   any other front end.

Classes:
    Token: The non-digit tokens the keypad can submit.
    CalculatorSession: The main container class.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import StrEnum
import logging

from imperialcalc.config import DEFAULT_FRACTION_RESOLUTION, FRACTION_RESOLUTIONS, OPERATORS
from imperialcalc.model import conversions
from imperialcalc.model.evaluator import evaluate
from imperialcalc.model.expression import Expression
from imperialcalc.model.history import HistoryStack, Snapshot

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class Token(StrEnum):
    FEET = "feet"
    INCH = "inch"
    SLASH = "/"
    DOT = "."
    PLUS = "+"
    MINUS = "-"
    TIMES = "x"
    DIVIDE = "÷"
    EQUALS = "="
    CLEAR = "clear"
    UNDO = "undo"
    SETTING = "setting"


@dataclass
class CalculatorSession:
    """
    Holds the entire state of one calculator session.
    Pass this instance to the Store; it is not safe to submit tokens from
    more than one thread at a time.
    """
    fraction_resolution: int = DEFAULT_FRACTION_RESOLUTION
    expression: Expression = field(default_factory=Expression)
    secondary: str = ""
    history: HistoryStack = field(default_factory=HistoryStack)

    def __post_init__(self) -> None:
        self._check_resolution(self.fraction_resolution)

    # ---------- Display lines ----------

    def current_primary(self) -> str:
        return self.expression.text

    def current_secondary(self) -> str:
        return self.secondary

    def millimeter_conversion(self) -> str:
        return conversions.millimeter_conversion(self.current_primary())

    def sheets_count_display(self) -> str:
        return conversions.sheets_count_display(self.current_primary())

    # ---------- Configuration ----------

    @staticmethod
    def _check_resolution(value: int) -> None:
        if value not in FRACTION_RESOLUTIONS:
            raise ValueError(
                f"Fraction resolution must be one of {FRACTION_RESOLUTIONS}, got {value!r}."
            )

    def set_fraction_resolution(self, value: int) -> None:
        """Change the grid used by later evaluations. Existing lines are not reformatted."""
        self._check_resolution(value)
        if value != self.fraction_resolution:
            self.fraction_resolution = value
            logger.info(f"Fraction resolution set to 1/{value}.")

    # ---------- Token handling ----------

    def submit(self, token: str) -> bool:
        """
        Apply one keypad token.

        Returns:
            True if the display lines changed. Rejected tokens and
            expressions that cannot be evaluated leave everything unchanged.
        """
        if token == Token.UNDO:
            return self.undo()

        if token == Token.SETTING:
            # Routed to the settings dialog by the presentation layer
            return False

        before = Snapshot(primary=self.current_primary(), secondary=self.secondary)
        changed = self._apply(token)
        if changed:
            self.history.push(before)
        return changed

    def _apply(self, token: str) -> bool:
        if token == Token.CLEAR:
            if not self.current_primary() and not self.secondary:
                return False
            self.expression = Expression()
            self.secondary = ""
            return True

        if token == Token.EQUALS:
            return self._evaluate()

        # Work on a copy so a rejected token cannot leave partial edits behind
        candidate = copy.deepcopy(self.expression)

        if (len(token) == 1 and token in DIGITS) or token == Token.DOT:
            accepted = candidate.accept_digit(token)
        elif token == Token.FEET:
            accepted = candidate.accept_foot()
        elif token == Token.INCH:
            accepted = candidate.accept_inch()
        elif token == Token.SLASH:
            accepted = candidate.accept_slash()
        elif token in OPERATORS:
            accepted = candidate.accept_operator(token)
        else:
            logger.warning(f"Ignoring unknown token '{token}'.")
            return False

        if accepted:
            self.expression = candidate
        return accepted

    def _evaluate(self) -> bool:
        line = self.current_primary()
        result = evaluate(line, self.fraction_resolution)
        if result is None:
            return False

        logger.debug(f"Evaluated '{result.secondary}' = '{result.primary}'")
        self.expression = Expression.from_text(result.primary)
        self.secondary = result.secondary
        return True

    def undo(self) -> bool:
        """Restore the lines saved before the last accepted change. No-op on empty history."""
        snapshot = self.history.pop()
        if snapshot is None:
            return False
        self.expression = Expression.from_text(snapshot.primary)
        self.secondary = snapshot.secondary
        return True

    def reset(self) -> None:
        """Clear lines and history; the fraction resolution is kept."""
        self.expression = Expression()
        self.secondary = ""
        self.history.clear()
        logger.info("Calculator session has been reset.")
