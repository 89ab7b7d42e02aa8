"""On-screen keypad: digits on top, ENTER / operators / backspace below."""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from numbrle.core.expression import OPERATORS
from numbrle.core.feedback import CellState
from numbrle.core.validation import EQUALS
from numbrle.ui.colors import GameColors, hover_fill, key_fill

ENTER = "Enter"
BACKSPACE = "Backspace"
DIGIT_ROW = "1234567890"
SYMBOL_ROW = tuple(OPERATORS) + (EQUALS,)


class Keypad(QWidget):
    """Clickable keys that report their value through *on_key*."""

    def __init__(self, on_key: Callable[[str], None], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._on_key = on_key
        self._buttons: Dict[str, QPushButton] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        top = QHBoxLayout()
        top.setSpacing(6)
        for key in DIGIT_ROW:
            top.addWidget(self._make_button(key, key))
        layout.addLayout(top)

        bottom = QHBoxLayout()
        bottom.setSpacing(6)
        bottom.addWidget(self._make_button(ENTER, "ENTER", wide=True))
        for key in SYMBOL_ROW:
            bottom.addWidget(self._make_button(key, key))
        bottom.addWidget(self._make_button(BACKSPACE, "⌫", wide=True))
        layout.addLayout(bottom)

        self.set_states({})

    def _make_button(self, key: str, label: str, wide: bool = False) -> QPushButton:
        button = QPushButton(label)
        button.setCursor(Qt.PointingHandCursor)
        button.setFocusPolicy(Qt.NoFocus)
        button.setMinimumHeight(52)
        button.setMinimumWidth(72 if wide else 40)
        button.clicked.connect(lambda _checked=False, k=key: self._on_key(k))
        self._buttons[key] = button
        return button

    def set_states(self, states: Mapping[str, CellState]) -> None:
        """Recolor keys from the best feedback seen for each character."""
        for key, button in self._buttons.items():
            fill = key_fill(states.get(key))
            hover = hover_fill(states.get(key))
            button.setStyleSheet(
                f"""
                QPushButton {{
                    background: {fill};
                    color: {GameColors.TEXT};
                    border: none;
                    border-radius: 6px;
                    font-size: 18px;
                    font-weight: 700;
                }}
                QPushButton:hover {{
                    background: {hover};
                }}
                """
            )
