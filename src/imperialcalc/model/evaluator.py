"""
Expression Evaluator
====================
Evaluates "<operand> <op> <operand>" lines produced by the input state machine.

`x` multiplies two lengths into an area in square feet; `+`, `-` and `÷`
produce a length in inches that is formatted back to feet and inches.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from imperialcalc.config import OPERATOR_SUBSTRINGS
from imperialcalc.model.formatter import format_area, format_feet_inches
from imperialcalc.model.parser import parse_measurement
from imperialcalc.utils import inches_to_feet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """New (primary, secondary) display lines after '='."""
    primary: str
    secondary: str


def evaluate(line: str, resolution: int) -> Optional[Evaluation]:
    """
    Evaluate a single binary expression.

    Args:
        line: The primary line, e.g. "2′ + 3″".
        resolution: Fraction grid used to format linear results.

    Returns:
        The new display lines, or None if the line cannot be evaluated
        (no operator, malformed split, empty operand, division by zero).
    """
    op_substring = next((s for s in OPERATOR_SUBSTRINGS if s in line), None)
    if op_substring is None:
        logger.debug("Nothing to evaluate in '%s'.", line)
        return None

    parts = line.split(op_substring)
    if len(parts) != 2:
        logger.debug("Malformed expression '%s'.", line)
        return None

    lhs = parse_measurement(parts[0])
    rhs = parse_measurement(parts[1])
    if lhs is None or rhs is None:
        logger.debug("Missing operand in '%s'.", line)
        return None

    op = op_substring.strip()
    if op == "x":
        square_feet = inches_to_feet(lhs) * inches_to_feet(rhs)
        return Evaluation(primary=format_area(square_feet), secondary=line)

    if op == "+":
        result = lhs + rhs
    elif op == "-":
        result = lhs - rhs
    else:
        if rhs == 0:
            logger.debug("Division by zero in '%s'.", line)
            return None
        result = lhs / rhs

    return Evaluation(primary=format_feet_inches(result, resolution), secondary=line)
