"""Wordle-style feedback against the canonical solution, plus share text."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence

from numbrle.core.solver import canonical_solution
from numbrle.core.validation import EQUATION_LENGTH, MAX_GUESSES

SHARE_FOOTER = "numbrle.vercel.app"


class CellState(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    EMPTY = "empty"


SHARE_EMOJI: Dict[CellState, str] = {
    CellState.CORRECT: "🟩",
    CellState.PRESENT: "🟨",
    CellState.ABSENT: "⬛",
    CellState.EMPTY: "⬜",
}

# Higher rank wins when one key appears in several guesses.
_KEY_RANK = {
    CellState.ABSENT: 1,
    CellState.PRESENT: 2,
    CellState.CORRECT: 3,
}


def score_guess(guess: str, target: int) -> List[CellState]:
    """Colour each position of *guess* against the reference equation.

    The reference is one fixed solution, so a winning guess that is written
    differently (``7×6=42`` against ``6×7=42``) is not all green.
    """
    solution = canonical_solution(target)
    cells = [CellState.EMPTY] * EQUATION_LENGTH
    used = [False] * EQUATION_LENGTH
    chars = guess[:EQUATION_LENGTH]

    for i, ch in enumerate(chars):
        if ch == solution[i]:
            cells[i] = CellState.CORRECT
            used[i] = True

    for i, ch in enumerate(chars):
        if cells[i] is CellState.CORRECT:
            continue
        cells[i] = CellState.ABSENT
        for j, sol_ch in enumerate(solution):
            if not used[j] and ch == sol_ch:
                cells[i] = CellState.PRESENT
                used[j] = True
                break
    return cells


def keyboard_states(guesses: Sequence[str], target: int) -> Dict[str, CellState]:
    """Best state seen so far for every key used in *guesses*."""
    states: Dict[str, CellState] = {}
    for guess in guesses:
        for ch, state in zip(guess, score_guess(guess, target)):
            if state is CellState.EMPTY:
                continue
            current = states.get(ch)
            if current is None or _KEY_RANK[state] > _KEY_RANK[current]:
                states[ch] = state
    return states


def share_text(
    guesses: Sequence[str],
    target: int,
    day: int,
    footer: str = SHARE_FOOTER,
) -> str:
    rows = [
        "".join(SHARE_EMOJI[state] for state in score_guess(guess, target))
        for guess in guesses
    ]
    header = f"Numbrle #{day} {len(guesses)}/{MAX_GUESSES}"
    return f"{header}\n\n" + "\n".join(rows) + f"\n\n{footer}"
