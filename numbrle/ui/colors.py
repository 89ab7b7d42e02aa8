"""Theme colors and color utilities for the UI."""

from typing import Optional, Tuple

from numbrle.core.feedback import CellState


class GameColors:
    """Dark theme palette."""

    BG = "#121213"
    BG_SECONDARY = "#1e1e20"
    CELL_BORDER = "#3a3a3c"
    CELL_BORDER_ACTIVE = "#565758"

    CORRECT = "#538d4e"
    PRESENT = "#b59f3b"
    ABSENT = "#3a3a3c"
    KEY = "#818384"

    TEXT = "#ffffff"
    TEXT_MUTED = "#a1a1a6"
    TEXT_ON_TILE = "#ffffff"

    OVERLAY_BG = "rgba(0, 0, 0, 0.55)"
    MODAL_BG = "#1a1a1b"
    TOAST_BG = "#f5f5f5"
    TOAST_TEXT = "#121213"


_CELL_FILL = {
    CellState.CORRECT: GameColors.CORRECT,
    CellState.PRESENT: GameColors.PRESENT,
    CellState.ABSENT: GameColors.ABSENT,
    CellState.EMPTY: GameColors.BG,
}


def cell_fill(state: CellState) -> str:
    """Background color for a grid cell or keypad key in *state*."""
    return _CELL_FILL[state]


def key_fill(state: Optional[CellState]) -> str:
    """Keypad keys with no feedback yet keep the neutral key color."""
    if state is None:
        return GameColors.KEY
    return _CELL_FILL[state]


def _rgb(color: str) -> Optional[Tuple[int, int, int]]:
    color = color.strip()
    if len(color) != 7 or not color.startswith("#"):
        return None
    try:
        return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)
    except ValueError:
        return None


def blend_hex(a: str, b: str, t: float) -> str:
    """Mix two #RRGGBB colors; t=0 gives *a*, t=1 gives *b*.

    Anything that is not a #RRGGBB string leaves *a* unchanged.
    """
    start, end = _rgb(a), _rgb(b)
    if start is None or end is None:
        return a
    t = max(0.0, min(1.0, t))
    mixed = (int(s + (e - s) * t) for s, e in zip(start, end))
    return "#" + "".join(f"{c:02X}" for c in mixed)


def hover_fill(state: Optional[CellState]) -> str:
    """Keypad key color under the mouse: the key fill lifted towards white."""
    return blend_hex(key_fill(state), "#FFFFFF", 0.12)
