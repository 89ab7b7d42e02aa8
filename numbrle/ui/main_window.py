from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent, QGuiApplication, QKeyEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from numbrle.core.session import GameSession
from numbrle.core.validation import EQUATION_LENGTH
from numbrle.ui.board import GuessGrid
from numbrle.ui.colors import GameColors
from numbrle.ui.keypad import BACKSPACE, ENTER, Keypad
from numbrle.ui.models import build_rows, normalize_key
from numbrle.ui.overlays import HelpOverlay, StatsOverlay

logger = logging.getLogger(__name__)

TOAST_MS = 2000


class MainWindow(QMainWindow):
    """Single-screen game window: target, guess grid and keypad.

    All game rules live in :class:`GameSession`; the window only collects
    the characters of the row being typed and redraws from the session
    after every change.
    """

    def __init__(self, session: GameSession, title: str = "Numbrle") -> None:
        super().__init__()
        self._session = session
        self._title = title
        self._current = ""

        self._grid: Optional[GuessGrid] = None
        self._keypad: Optional[Keypad] = None
        self._toast_label: Optional[QLabel] = None
        self._toast_timer = QTimer(self)
        self._toast_timer.setSingleShot(True)
        self._toast_timer.timeout.connect(self._hide_toast)
        self._help_overlay: Optional[HelpOverlay] = None
        self._stats_overlay: Optional[StatsOverlay] = None

        self._build_ui()
        self._refresh()

        if self._session.finished:
            QTimer.singleShot(500, self._show_stats)
        elif self._session.is_first_visit:
            QTimer.singleShot(0, self._show_help)

    def _build_ui(self) -> None:
        self.setWindowTitle(self._title)
        self.setMinimumSize(420, 680)

        root = QWidget()
        root.setObjectName("root")
        root.setStyleSheet(f"QWidget#root {{ background: {GameColors.BG}; }}")
        layout = QVBoxLayout(root)
        layout.setContentsMargins(16, 12, 16, 16)
        layout.setSpacing(12)

        header = QHBoxLayout()
        help_btn = self._header_button("?", self._show_help)
        stats_btn = self._header_button("📊", self._show_stats)
        title = QLabel(self._title)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {GameColors.TEXT}; font-size: 26px; font-weight: 900;")
        header.addWidget(help_btn)
        header.addWidget(title, 1)
        header.addWidget(stats_btn)
        layout.addLayout(header)

        caption = QLabel("Today's Target")
        caption.setAlignment(Qt.AlignCenter)
        caption.setStyleSheet(f"color: {GameColors.TEXT_MUTED}; font-size: 12px;")
        target = QLabel(str(self._session.target))
        target.setAlignment(Qt.AlignCenter)
        target.setStyleSheet(f"color: {GameColors.CORRECT}; font-size: 40px; font-weight: 900;")
        layout.addWidget(caption)
        layout.addWidget(target)

        self._toast_label = QLabel("")
        self._toast_label.setAlignment(Qt.AlignCenter)
        self._toast_label.setFixedHeight(32)
        self._toast_label.setStyleSheet(
            f"background: {GameColors.TOAST_BG}; color: {GameColors.TOAST_TEXT};"
            " border-radius: 6px; font-weight: 700; padding: 0 12px;"
        )
        self._toast_label.setVisible(False)
        layout.addWidget(self._toast_label, 0, Qt.AlignHCenter)

        self._grid = GuessGrid()
        layout.addWidget(self._grid, 1)

        self._keypad = Keypad(self._handle_key)
        layout.addWidget(self._keypad)

        self.setCentralWidget(root)

        self._help_overlay = HelpOverlay(root)
        self._stats_overlay = StatsOverlay(self._share, root)

    def _header_button(self, text: str, slot) -> QPushButton:
        button = QPushButton(text)
        button.setCursor(Qt.PointingHandCursor)
        button.setFocusPolicy(Qt.NoFocus)
        button.setFixedSize(40, 40)
        button.setStyleSheet(
            f"QPushButton {{ background: transparent; color: {GameColors.TEXT};"
            f" border: 1px solid {GameColors.CELL_BORDER}; border-radius: 20px;"
            " font-size: 18px; font-weight: 800; }"
        )
        button.clicked.connect(slot)
        return button

    def _refresh(self) -> None:
        if self._grid is not None:
            self._grid.set_rows(
                build_rows(
                    self._session.guesses,
                    self._session.rows(),
                    self._current,
                    self._session.finished,
                )
            )
        if self._keypad is not None:
            self._keypad.set_states(self._session.keyboard())

    def _overlay_open(self) -> bool:
        return any(
            o is not None and o.isVisible()
            for o in (self._help_overlay, self._stats_overlay)
        )

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if self._overlay_open():
            if event.key() == Qt.Key_Escape:
                for overlay in (self._help_overlay, self._stats_overlay):
                    if overlay is not None and overlay.isVisible():
                        overlay.close_overlay()
            return
        key = event.key()
        if key in (Qt.Key_Return, Qt.Key_Enter):
            self._handle_key(ENTER)
        elif key == Qt.Key_Backspace:
            self._handle_key(BACKSPACE)
        else:
            ch = normalize_key(event.text())
            if ch is None:
                super().keyPressEvent(event)
                return
            self._handle_key(ch)

    def _handle_key(self, key: str) -> None:
        if self._session.finished:
            return
        if key == ENTER:
            self._submit()
        elif key == BACKSPACE:
            self._current = self._current[:-1]
        elif len(self._current) < EQUATION_LENGTH:
            self._current += key
        self._refresh()

    def _submit(self) -> None:
        outcome = self._session.submit(self._current)
        if not outcome.accepted:
            self._toast(outcome.reason or "Invalid guess")
            self._flash_rejected_row()
            return
        self._current = ""
        if outcome.finished:
            message = "🎉 Brilliant!" if outcome.won else "The answer was one possible equation"
            QTimer.singleShot(300, lambda: self._toast(message))
            QTimer.singleShot(1800, self._show_stats)

    def _flash_rejected_row(self) -> None:
        if self._grid is None:
            return
        self._grid.set_shake_row(len(self._session.guesses))
        QTimer.singleShot(300, lambda: self._grid.set_shake_row(None))

    def _toast(self, message: str) -> None:
        if self._toast_label is None:
            return
        self._toast_label.setText(message)
        self._toast_label.adjustSize()
        self._toast_label.setVisible(True)
        self._toast_timer.start(TOAST_MS)

    def _hide_toast(self) -> None:
        if self._toast_label is not None:
            self._toast_label.setVisible(False)

    def _show_help(self) -> None:
        if self._help_overlay is not None:
            self._help_overlay.open_overlay()

    def _show_stats(self) -> None:
        if self._stats_overlay is None:
            return
        winning_row = None
        if self._session.finished and self._session.won:
            winning_row = len(self._session.guesses) - 1
        self._stats_overlay.set_stats(self._session.stats, winning_row)
        self._stats_overlay.open_overlay()

    def _share(self) -> None:
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            logger.warning("Clipboard unavailable; share text not copied")
            return
        clipboard.setText(self._session.share())
        self._toast("Copied to clipboard!")

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        for overlay in (self._help_overlay, self._stats_overlay):
            if overlay is not None and overlay.isVisible():
                overlay.setGeometry(overlay.parentWidget().rect())

    def closeEvent(self, event: QCloseEvent) -> None:
        # Every accepted guess is already saved; nothing pending here.
        logger.info("Closing day %d with %d guesses", self._session.day, len(self._session.guesses))
        super().closeEvent(event)
