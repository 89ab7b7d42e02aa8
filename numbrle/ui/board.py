"""Guess grid: six rows of equation cells colored by feedback."""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from numbrle.core.feedback import CellState
from numbrle.core.validation import EQUATION_LENGTH, MAX_GUESSES
from numbrle.ui.colors import GameColors, blend_hex, cell_fill
from numbrle.ui.models import RowView


class GuessGrid(QWidget):
    """Grid of MAX_GUESSES rows by EQUATION_LENGTH cells."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._rows: List[RowView] = []
        self._shake_row: Optional[int] = None
        self.setMinimumSize(EQUATION_LENGTH * 48, MAX_GUESSES * 48)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def set_rows(self, rows: List[RowView]) -> None:
        self._rows = list(rows)
        self.update()

    def set_shake_row(self, index: Optional[int]) -> None:
        """Outline *index* in red to flag a rejected guess; None clears it."""
        self._shake_row = index
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if not self._rows:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        spacing = 6
        box = min(
            (self.width() - spacing * (EQUATION_LENGTH - 1)) // EQUATION_LENGTH,
            (self.height() - spacing * (MAX_GUESSES - 1)) // MAX_GUESSES,
            64,
        )
        box = max(box, 24)
        total_w = EQUATION_LENGTH * (box + spacing) - spacing
        total_h = MAX_GUESSES * (box + spacing) - spacing
        start_x = max(0, (self.width() - total_w) // 2)
        start_y = max(0, (self.height() - total_h) // 2)

        font = painter.font()
        font.setPointSize(max(10, int(box * 0.42)))
        font.setBold(True)
        painter.setFont(font)

        for r, row in enumerate(self._rows):
            y = start_y + r * (box + spacing)
            for c in range(EQUATION_LENGTH):
                x = start_x + c * (box + spacing)
                ch = row.chars[c] if c < len(row.chars) else ""
                state = row.cells[c] if c < len(row.cells) else CellState.EMPTY

                if row.submitted:
                    painter.setBrush(QColor(cell_fill(state)))
                    painter.setPen(Qt.NoPen)
                else:
                    painter.setBrush(QColor(GameColors.BG))
                    border = GameColors.CELL_BORDER_ACTIVE if ch else GameColors.CELL_BORDER
                    if row.cursor == c:
                        border = blend_hex(GameColors.CELL_BORDER_ACTIVE, GameColors.TEXT, 0.5)
                    if r == self._shake_row:
                        border = "#e57373"
                    painter.setPen(QPen(QColor(border), 2))
                painter.drawRoundedRect(x, y, box, box, 4, 4)

                if ch:
                    painter.setPen(QColor(GameColors.TEXT_ON_TILE))
                    painter.drawText(x, y, box, box, Qt.AlignCenter, ch)
