"""ControlPanel — puzzle action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtBoundSignal, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from tactician.puzzles.session import PuzzleOutcome
from tactician.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for puzzle actions: give up, retry, next, flip."""

    give_up_clicked = pyqtSignal()
    retry_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()
        self.set_outcome(PuzzleOutcome.PENDING)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Helvetica Neue", 10)

        row1 = QHBoxLayout()
        self._btn_give_up = self._make_button(btn_font, self.give_up_clicked)
        self._btn_give_up.setObjectName("giveUpButton")
        row1.addWidget(self._btn_give_up)

        self._btn_retry = self._make_button(btn_font, self.retry_clicked)
        row1.addWidget(self._btn_retry)

        self._btn_next = self._make_button(btn_font, self.next_clicked)
        row1.addWidget(self._btn_next)
        layout.addLayout(row1)

        row2 = QHBoxLayout()
        self._btn_flip = self._make_button(btn_font, self.flip_clicked)
        row2.addWidget(self._btn_flip)
        layout.addLayout(row2)

    @staticmethod
    def _make_button(font: QFont, signal: pyqtBoundSignal) -> QPushButton:
        button = QPushButton()
        button.setFont(font)
        button.setMinimumHeight(36)
        button.clicked.connect(signal)
        return button

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_give_up.setText(s.btn_give_up)
        self._btn_retry.setText(s.btn_retry)
        self._btn_next.setText(s.btn_next)
        self._btn_flip.setText(s.btn_flip)

    def set_outcome(self, outcome: PuzzleOutcome) -> None:
        """Show the buttons that make sense for *outcome*.

        Giving up stays available until the puzzle is solved; retrying is
        only offered after a wrong move.
        """
        self._btn_give_up.setVisible(outcome != PuzzleOutcome.SOLVED)
        self._btn_retry.setVisible(outcome == PuzzleOutcome.FAILED)
