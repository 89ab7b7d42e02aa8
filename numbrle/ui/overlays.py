"""In-window Help and Statistics overlays."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from numbrle.core.feedback import CellState
from numbrle.core.records import GameStats, win_percentage
from numbrle.core.validation import EQUATION_LENGTH, MAX_GUESSES
from numbrle.ui.colors import GameColors, cell_fill


class _ModalOverlay(QWidget):
    """Dimmed backdrop with a centered card; clicking the backdrop closes it."""

    closed = Signal()

    def __init__(self, title: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        overlay_bg = QWidget(self)
        overlay_bg.setStyleSheet(f"background: {GameColors.OVERLAY_BG};")
        overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        def on_overlay_click(_e) -> None:
            self.close_overlay()

        overlay_bg.mousePressEvent = on_overlay_click
        main_layout.addWidget(overlay_bg, 0, 0)

        container = QFrame(self)
        container.setObjectName("modalContainer")
        container.setMinimumWidth(360)
        container.setMaximumWidth(480)
        container.setStyleSheet(
            f"""
            QFrame#modalContainer {{
                background: {GameColors.MODAL_BG};
                border: 1px solid {GameColors.CELL_BORDER};
                border-radius: 12px;
            }}
            QLabel {{ color: {GameColors.TEXT}; }}
            """
        )
        shadow = QGraphicsDropShadowEffect(container)
        shadow.setBlurRadius(24)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 120))
        container.setGraphicsEffect(shadow)

        self.body = QVBoxLayout(container)
        self.body.setContentsMargins(24, 18, 24, 24)
        self.body.setSpacing(10)

        header = QHBoxLayout()
        title_label = QLabel(title)
        title_label.setStyleSheet("font-size: 18px; font-weight: 800;")
        close_btn = QPushButton("×")
        close_btn.setCursor(Qt.PointingHandCursor)
        close_btn.setFixedSize(32, 32)
        close_btn.setStyleSheet(
            f"QPushButton {{ background: transparent; color: {GameColors.TEXT_MUTED};"
            " border: none; font-size: 22px; }"
        )
        close_btn.clicked.connect(self.close_overlay)
        header.addWidget(title_label, 1)
        header.addWidget(close_btn, 0, Qt.AlignRight)
        self.body.addLayout(header)

        main_layout.addWidget(container, 0, 0, Qt.AlignCenter)
        self.hide()

    def open_overlay(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())
        self.raise_()
        self.show()

    def close_overlay(self) -> None:
        self.hide()
        self.closed.emit()

    def _paragraph(self, text: str, muted: bool = False) -> QLabel:
        label = QLabel(text)
        label.setWordWrap(True)
        color = GameColors.TEXT_MUTED if muted else GameColors.TEXT
        label.setStyleSheet(f"color: {color}; font-size: 13px;")
        return label


class HelpOverlay(_ModalOverlay):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("How to Play", parent)
        self.body.addWidget(
            self._paragraph(
                f"Build a math equation that equals today's target number in "
                f"{MAX_GUESSES} guesses. Each equation must be exactly "
                f"{EQUATION_LENGTH} characters and include an = sign."
            )
        )
        self.body.addWidget(
            self._paragraph("Example: if the target is 42, a valid guess is 6×7=42.")
        )
        for line in (
            "• Use digits 0-9 and operators + - × ÷ =",
            "• The right side of = must be the target number",
            "• The left side must evaluate to the target",
            "• Any correct equation wins",
            "• × and ÷ are worked out before + and -",
        ):
            self.body.addWidget(self._paragraph(line))

        self.body.addWidget(
            self._paragraph("If the reference answer is 6×7=42, the guess 7×6=42 shows:", muted=True)
        )
        example = QHBoxLayout()
        example.setSpacing(4)
        for ch, state in zip(
            "7×6=42",
            (
                CellState.PRESENT,
                CellState.CORRECT,
                CellState.PRESENT,
                CellState.CORRECT,
                CellState.CORRECT,
                CellState.CORRECT,
            ),
        ):
            tile = QLabel(ch)
            tile.setAlignment(Qt.AlignCenter)
            tile.setFixedSize(36, 36)
            tile.setStyleSheet(
                f"background: {cell_fill(state)}; color: {GameColors.TEXT};"
                " font-weight: 800; border-radius: 4px;"
            )
            example.addWidget(tile)
        example.addStretch(1)
        self.body.addLayout(example)

        for line in (
            "Green: correct character, correct position",
            "Yellow: correct character, wrong position",
            "Gray: character not in the solution",
        ):
            self.body.addWidget(self._paragraph(line))
        self.body.addWidget(
            self._paragraph("A new puzzle appears every day at midnight.", muted=True)
        )


class StatsOverlay(_ModalOverlay):
    """Lifetime statistics with a guess distribution and a share button."""

    def __init__(self, on_share: Callable[[], None], parent: Optional[QWidget] = None) -> None:
        super().__init__("Statistics", parent)
        self._on_share = on_share

        stats_row = QHBoxLayout()
        self._values: Dict[str, QLabel] = {}
        for key, caption in (
            ("played", "Played"),
            ("win", "Win %"),
            ("streak", "Streak"),
            ("max", "Max Streak"),
        ):
            col = QVBoxLayout()
            value = QLabel("0")
            value.setAlignment(Qt.AlignCenter)
            value.setStyleSheet("font-size: 28px; font-weight: 800;")
            label = QLabel(caption)
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet(f"color: {GameColors.TEXT_MUTED}; font-size: 11px;")
            col.addWidget(value)
            col.addWidget(label)
            stats_row.addLayout(col)
            self._values[key] = value
        self.body.addLayout(stats_row)

        heading = QLabel("Guess Distribution")
        heading.setStyleSheet("font-size: 15px; font-weight: 800; margin-top: 8px;")
        self.body.addWidget(heading)

        self._bars: List[QLabel] = []
        for i in range(MAX_GUESSES):
            row = QHBoxLayout()
            row.setSpacing(6)
            idx = QLabel(str(i + 1))
            idx.setFixedWidth(14)
            bar = QLabel("0")
            bar.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            bar.setFixedHeight(22)
            row.addWidget(idx)
            row.addWidget(bar)
            row.addStretch(1)
            self.body.addLayout(row)
            self._bars.append(bar)

        self._share_btn = QPushButton("Share Results")
        self._share_btn.setCursor(Qt.PointingHandCursor)
        self._share_btn.setMinimumHeight(44)
        self._share_btn.setStyleSheet(
            f"QPushButton {{ background: {GameColors.CORRECT}; color: {GameColors.TEXT};"
            " border: none; border-radius: 8px; font-size: 16px; font-weight: 800; }"
        )
        self._share_btn.clicked.connect(lambda: self._on_share())
        self.body.addWidget(self._share_btn)
        self._share_btn.setVisible(False)

    def set_stats(self, stats: GameStats, winning_row: Optional[int] = None) -> None:
        """Refresh numbers; *winning_row* (0-based) highlights today's bar and shows Share."""
        self._values["played"].setText(str(stats.played))
        self._values["win"].setText(str(win_percentage(stats)))
        self._values["streak"].setText(str(stats.streak))
        self._values["max"].setText(str(stats.max_streak))

        peak = max(max(stats.guess_distribution), 1)
        for i, (bar, count) in enumerate(zip(self._bars, stats.guess_distribution)):
            width = max(int(count / peak * 300), 24)
            color = GameColors.CORRECT if i == winning_row else GameColors.ABSENT
            bar.setText(f"{count} ")
            bar.setFixedWidth(width)
            bar.setStyleSheet(
                f"background: {color}; color: {GameColors.TEXT}; font-weight: 700;"
            )
        self._share_btn.setVisible(winning_row is not None)
