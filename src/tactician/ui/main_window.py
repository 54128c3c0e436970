"""TrainerWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from tactician.core.enums import Color
from tactician.core.move import Move
from tactician.core.position import Position
from tactician.puzzles.session import PuzzleOutcome, TrainerSession
from tactician.ui.board.board_view import BoardView
from tactician.ui.i18n import t
from tactician.ui.panels.control_panel import ControlPanel
from tactician.ui.settings import TrainerSettings, apply_settings

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])

_RESULT_PROPERTY = {
    PuzzleOutcome.PENDING: "",
    PuzzleOutcome.SOLVED: "success",
    PuzzleOutcome.FAILED: "fail",
    PuzzleOutcome.REVEALED: "",
}


class TrainerWindow(QMainWindow):
    """Main application window: one board, one puzzle at a time."""

    def __init__(
        self, session: TrainerSession, settings: TrainerSettings | None = None
    ) -> None:
        super().__init__()
        self.setMinimumSize(720, 560)
        self.resize(960, 700)

        self._session = session
        self._settings = settings if settings is not None else TrainerSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_session_events()

        apply_settings(self)
        self._show_current_puzzle()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> TrainerSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    @property
    def result_label(self) -> QLabel:
        return self._result_label

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._result_label = QLabel()
        self._result_label.setObjectName("resultLabel")
        self._result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._result_label.setWordWrap(True)
        right.addWidget(self._result_label)
        right.addStretch(1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(240)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        self._menu_puzzle = menu_bar.addMenu(s.menu_puzzle)
        assert self._menu_puzzle is not None

        self._act_next = QAction(s.menu_next_puzzle, self)
        self._act_next.setShortcut("Ctrl+N")
        self._act_next.triggered.connect(self._on_next)
        self._menu_puzzle.addAction(self._act_next)

        self._act_retry = QAction(s.menu_retry, self)
        self._act_retry.setShortcut("Ctrl+R")
        self._act_retry.triggered.connect(self._on_retry)
        self._menu_puzzle.addAction(self._act_retry)

        self._menu_puzzle.addSeparator()

        self._act_flip = QAction(s.menu_flip_board, self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_puzzle.addAction(self._act_flip)

        self._menu_puzzle.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_puzzle.addAction(self._act_quit)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.move_requested.connect(self._on_user_move)
        self._board_view.board_scene.set_destination_provider(self._session.destinations)
        self._control_panel.give_up_clicked.connect(self._on_give_up)
        self._control_panel.retry_clicked.connect(self._on_retry)
        self._control_panel.next_clicked.connect(self._on_next)
        self._control_panel.flip_clicked.connect(self._on_flip)

    def _connect_session_events(self) -> None:
        """Subscribe to TrainerSession callbacks (idempotent)."""
        events = self._session.events
        self._replace_callback(events.on_position_changed, self._on_position_changed)
        self._replace_callback(events.on_outcome, self._on_outcome)

    def _disconnect_session_events(self) -> None:
        """Detach this window from TrainerSession callbacks."""
        events = self._session.events
        self._remove_callback(events.on_position_changed, self._on_position_changed)
        self._remove_callback(events.on_outcome, self._on_outcome)

    @staticmethod
    def _replace_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_session_events()
        super().closeEvent(event)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_user_move(self, move: Move) -> None:
        """Handle a move from the board UI."""
        if not self._session.submit_move(move.from_sq, move.to_sq):
            _LOGGER.debug("Rejected move from board: %s", move)

    def _on_give_up(self) -> None:
        self._session.give_up()

    def _on_retry(self) -> None:
        self._session.retry()

    def _on_next(self) -> None:
        self._session.next_puzzle()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    # ── Settings / i18n ──────────────────────────────────────────────────

    def apply_settings(self, settings: TrainerSettings) -> None:
        """Replace the current settings and refresh the UI."""
        self._settings = settings
        apply_settings(self)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(s.window_title)
        # Menu bar
        self._menu_puzzle.setTitle(s.menu_puzzle)
        self._act_next.setText(s.menu_next_puzzle)
        self._act_retry.setText(s.menu_retry)
        self._act_flip.setText(s.menu_flip_board)
        self._act_quit.setText(s.menu_quit)
        # Child widgets
        self._control_panel.retranslate_ui()
        self._update_result_label()
        self._update_status()

    # ── Session event callbacks ──────────────────────────────────────────

    def _on_position_changed(self, position: Position, last_move: Move | None) -> None:
        scene = self._board_view.board_scene
        scene.set_position(position)
        scene.highlight_last_move(last_move)
        self._update_result_label()
        self._update_status()

    def _on_outcome(self, outcome: PuzzleOutcome) -> None:
        self._board_view.board_scene.set_interactive(outcome == PuzzleOutcome.PENDING)
        self._control_panel.set_outcome(outcome)
        self._update_result_label()

    # ── Display helpers ──────────────────────────────────────────────────

    def _show_current_puzzle(self) -> None:
        """Sync every widget with the session without waiting for an event."""
        self._on_position_changed(self._session.position, self._session.last_move)
        self._on_outcome(self._session.outcome)
        self._update_status()

    def _result_text(self) -> str:
        s = t()
        outcome = self._session.outcome
        if outcome == PuzzleOutcome.SOLVED:
            return s.result_correct
        if outcome == PuzzleOutcome.FAILED:
            return s.result_incorrect
        if outcome == PuzzleOutcome.REVEALED:
            return s.result_answer.format(san=self._session.puzzle.solution)
        if self._session.position.active_color == Color.WHITE:
            return s.turn_white
        return s.turn_black

    def _update_result_label(self) -> None:
        label = self._result_label
        label.setText(self._result_text())
        label.setProperty("result", _RESULT_PROPERTY[self._session.outcome])
        # Re-evaluate the property selectors in the stylesheet
        style = label.style()
        if style is not None:
            style.unpolish(label)
            style.polish(label)

    def _update_status(self) -> None:
        corpus = self._session.corpus
        puzzle = self._session.puzzle
        if puzzle not in corpus:
            self._status_label.clear()
            return
        number = corpus.index(puzzle) + 1
        self._status_label.setText(
            t().status_puzzle.format(number=number, total=len(corpus))
        )
