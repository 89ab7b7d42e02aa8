"""Guess validation: a guess is accepted only if it is a true equation for the target."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from numbrle.core.expression import DIGITS, OPERATORS, evaluate

EQUATION_LENGTH = 6
MAX_GUESSES = 6
EQUALS = "="
VALID_CHARS = DIGITS + "".join(OPERATORS) + EQUALS


class Rejection(Enum):
    WRONG_LENGTH = "wrong_length"
    EQUALS_COUNT = "equals_count"
    EMPTY_SIDE = "empty_side"
    RIGHT_SIDE = "right_side"
    INVALID_EXPRESSION = "invalid_expression"
    WRONG_VALUE = "wrong_value"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: Optional[str] = None
    rejection: Optional[Rejection] = None


def _reject(rejection: Rejection, reason: str) -> ValidationResult:
    return ValidationResult(valid=False, reason=reason, rejection=rejection)


def validate_guess(guess: str, target: int) -> ValidationResult:
    """Check *guess* against *target*, stopping at the first failed rule.

    The rules run in this order: length, a single ``=``, both sides present,
    right side is the target written plainly, left side parses, left side
    equals the target. A guess that passes every rule wins the game.
    """
    if len(guess) != EQUATION_LENGTH:
        return _reject(
            Rejection.WRONG_LENGTH,
            f"Equation must be {EQUATION_LENGTH} characters",
        )
    if guess.count(EQUALS) != 1:
        return _reject(Rejection.EQUALS_COUNT, "Equation must contain exactly one =")

    left, right = guess.split(EQUALS)
    if not left or not right:
        return _reject(Rejection.EMPTY_SIDE, "Both sides of = must have values")

    # Verbatim comparison rules out leading zeros, signs and padding.
    if right != str(target):
        return _reject(Rejection.RIGHT_SIDE, f"Right side must equal {target}")

    value = evaluate(left)
    if value is None:
        return _reject(Rejection.INVALID_EXPRESSION, "Invalid expression")
    if value != target:
        return _reject(
            Rejection.WRONG_VALUE,
            f"Expression equals {value}, not {target}",
        )
    return ValidationResult(valid=True)
