"""Canonical solution search.

Any equation that evaluates to the target wins, but feedback colouring needs
one fixed reference answer per target. The search below tries a handful of
expression shapes in a fixed order and returns the first hit, so the same
target always produces the same reference equation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterator, Optional

from numbrle.core.expression import OPERATORS, evaluate
from numbrle.core.validation import EQUATION_LENGTH

logger = logging.getLogger(__name__)


def _three_wide() -> Iterator[str]:
    for op in OPERATORS:
        for a in range(10):
            for b in range(10):
                yield f"{a}{op}{b}"


def _four_wide() -> Iterator[str]:
    for op in OPERATORS:
        for a in range(100):
            for b in range(10):
                yield f"{a:02d}{op}{b}"
                yield f"{b}{op}{a:02d}"
    # Five characters wide, so find_left_side never accepts these here.
    for op in OPERATORS:
        for a in range(100, 1000):
            for b in range(10):
                yield f"{a}{op}{b}"


def _five_wide() -> Iterator[str]:
    for op in OPERATORS:
        for a in range(10, 100):
            for b in range(10, 100):
                yield f"{a}{op}{b}"
        for a in range(100, 1000):
            for b in range(10):
                yield f"{a}{op}{b}"
                yield f"{b}{op}{a}"
    for op1 in OPERATORS:
        for op2 in OPERATORS:
            for a in range(10):
                for b in range(10):
                    for c in range(10):
                        yield f"{a}{op1}{b}{op2}{c}"


_SHAPES = {
    3: _three_wide,
    4: _four_wide,
    5: _five_wide,
}


def find_left_side(target: int, length: int) -> Optional[str]:
    """First expression of exactly *length* characters equal to *target*."""
    shapes = _SHAPES.get(length)
    if shapes is None:
        return None
    for expr in shapes():
        if len(expr) == length and evaluate(expr) == target:
            return expr
    return None


@lru_cache(maxsize=None)
def canonical_solution(target: int, length: int = EQUATION_LENGTH) -> str:
    """Reference equation for *target*, used only for feedback colouring."""
    right = f"={target}"
    left_length = length - len(right)
    left = find_left_side(target, left_length)
    if left is None:
        # Search-space gap: fall back to the zero-padded target on its own.
        left = str(target).zfill(left_length)
        logger.warning(
            "No %d-character expression shape for target %d; using %r",
            left_length,
            target,
            left,
        )
    return left + right
