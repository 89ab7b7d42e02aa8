"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from numbrle.core.feedback import CellState
from numbrle.core.validation import EQUATION_LENGTH, MAX_GUESSES, VALID_CHARS


@dataclass
class RowView:
    """UI state for one grid row: its characters, colors and cursor."""

    chars: str
    cells: List[CellState] = field(default_factory=list)
    is_current: bool = False
    submitted: bool = False

    @property
    def cursor(self) -> Optional[int]:
        """Position of the next character on the row being typed."""
        if not self.is_current or len(self.chars) >= EQUATION_LENGTH:
            return None
        return len(self.chars)


def build_rows(
    guesses: Sequence[str],
    scored: Sequence[List[CellState]],
    current: str,
    finished: bool,
) -> List[RowView]:
    """Lay out the full grid: submitted rows, the typing row, then blanks."""
    rows: List[RowView] = []
    for guess, cells in zip(guesses, scored):
        rows.append(RowView(chars=guess, cells=list(cells), submitted=True))
    while len(rows) < MAX_GUESSES:
        is_current = not finished and len(rows) == len(guesses)
        rows.append(
            RowView(
                chars=current if is_current else "",
                cells=[CellState.EMPTY] * EQUATION_LENGTH,
                is_current=is_current,
            )
        )
    return rows


# Physical keys that stand in for the display operators.
KEY_ALIASES = {"*": "×", "x": "×", "X": "×", "/": "÷"}


def normalize_key(text: str) -> Optional[str]:
    """Map typed text to an equation character, or None if it is not one."""
    if not text:
        return None
    ch = KEY_ALIASES.get(text, text)
    if len(ch) != 1 or ch not in VALID_CHARS:
        return None
    return ch
