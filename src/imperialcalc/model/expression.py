"""
Input State Machine
===================
Builds the primary expression line one token at a time and rejects tokens
that would make it syntactically illegal.

Why is this file needed?
------------------------
1. Validation: unit marks may appear once per operand, a fraction slash
   needs a preceding digit, and only one binary operator is allowed.
2. Structure: the line is kept as (left operand, operator, right operand)
   instead of being re-scanned for every keystroke.

Classes:
    InputState: Which part of the expression the next token edits.
    Operand: One side of the expression with its marker flags.
    Expression: The whole primary line.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from imperialcalc.config import (
    FOOT_ALIAS,
    FOOT_MARK,
    INCH_ALIAS,
    INCH_MARK,
    OPERATORS,
    SLASH,
)

logger = logging.getLogger(__name__)


class InputState(Enum):
    EMPTY = auto()
    LEFT_OPERAND = auto()
    OPERATOR_PLACED = auto()
    RIGHT_OPERAND = auto()


@dataclass
class Operand:
    """One side of a binary expression."""
    text: str = ""
    has_foot: bool = False
    has_inch: bool = False
    has_slash: bool = False

    @classmethod
    def from_text(cls, text: str) -> Operand:
        return cls(
            text=text,
            has_foot=FOOT_MARK in text,
            has_inch=INCH_MARK in text,
            has_slash=SLASH in text,
        )

    def append(self, char: str) -> None:
        self.text += char
        if char == FOOT_MARK:
            self.has_foot = True
        elif char == INCH_MARK:
            self.has_inch = True
        elif char == SLASH:
            self.has_slash = True

    @property
    def is_empty(self) -> bool:
        return not self.text


def split_operator(text: str) -> tuple[str, Optional[str], Optional[str]]:
    """
    Split a line on its operator.

    Returns:
        (left, operator, right); operator and right are None when the line
        holds no operator.
    """
    for op in OPERATORS:
        index = text.rfind(f" {op} ")
        if index != -1:
            return text[:index], op, text[index + len(op) + 2:]
    return text, None, None


@dataclass
class Expression:
    """
    The primary line as a structured expression.

    Every `accept_*` method either appends to the line and returns True, or
    leaves it untouched and returns False.
    """
    left: Operand = field(default_factory=Operand)
    operator: Optional[str] = None
    right: Optional[Operand] = None

    @classmethod
    def from_text(cls, text: str) -> Expression:
        """Rebuild the structure from a line (restored snapshot or evaluation result)."""
        left, op, right = split_operator(text)
        if op is None:
            return cls(left=Operand.from_text(left))
        return cls(left=Operand.from_text(left), operator=op, right=Operand.from_text(right or ""))

    @property
    def text(self) -> str:
        if self.operator is None:
            return self.left.text
        right = self.right.text if self.right is not None else ""
        return f"{self.left.text} {self.operator} {right}"

    @property
    def state(self) -> InputState:
        if self.operator is None:
            return InputState.EMPTY if self.left.is_empty else InputState.LEFT_OPERAND
        if self.right is None or self.right.is_empty:
            return InputState.OPERATOR_PLACED
        return InputState.RIGHT_OPERAND

    @property
    def active(self) -> Operand:
        """The operand the next token edits."""
        if self.operator is not None:
            if self.right is None:
                self.right = Operand()
            return self.right
        return self.left

    @property
    def last_char(self) -> Optional[str]:
        text = self.text
        return text[-1] if text else None

    def _ends_with_mark(self) -> bool:
        return self.last_char in (FOOT_MARK, INCH_MARK, SLASH)

    def _normalize_aliases(self) -> None:
        text = self.text
        if FOOT_ALIAS not in text and INCH_ALIAS not in text:
            return
        text = text.replace(FOOT_ALIAS, FOOT_MARK).replace(INCH_ALIAS, INCH_MARK)
        normalized = Expression.from_text(text)
        self.left, self.operator, self.right = normalized.left, normalized.operator, normalized.right

    def accept_digit(self, char: str) -> bool:
        """Digits and '.' are always appended; malformed numbers are handled leniently by the parser."""
        self.active.append(char)
        return True

    def accept_foot(self) -> bool:
        self._normalize_aliases()
        operand = self.active
        if operand.has_foot or operand.has_inch:
            logger.debug("Foot mark rejected: operand '%s' already has a unit mark.", operand.text)
            return False
        if self._ends_with_mark():
            logger.debug("Foot mark rejected: line ends with '%s'.", self.last_char)
            return False
        operand.append(FOOT_MARK)
        return True

    def accept_inch(self) -> bool:
        self._normalize_aliases()
        operand = self.active
        if operand.has_inch or operand.text.endswith(FOOT_MARK):
            logger.debug("Inch mark rejected for operand '%s'.", operand.text)
            return False
        if self._ends_with_mark():
            logger.debug("Inch mark rejected: line ends with '%s'.", self.last_char)
            return False
        operand.append(INCH_MARK)
        return True

    def accept_slash(self) -> bool:
        last = self.last_char
        operand = self.active
        if last is None or not last.isdigit() or operand.has_slash:
            logger.debug("Slash rejected after '%s'.", self.text)
            return False
        operand.append(SLASH)
        return True

    def accept_operator(self, op: str) -> bool:
        if op not in OPERATORS:
            raise ValueError(f"Unknown operator '{op}'.")

        last = self.last_char
        if last is None or last in OPERATORS or last.isspace():
            logger.debug("Operator '%s' rejected after '%s'.", op, self.text)
            return False
        if self.operator is not None:
            logger.debug("Operator '%s' rejected: line already has '%s'.", op, self.operator)
            return False

        self.operator = op
        self.right = Operand()
        return True
