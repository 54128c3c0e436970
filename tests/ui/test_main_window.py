"""Tests for TrainerWindow wiring between session, board and panels."""

from __future__ import annotations

import random

from tactician.core.move import Move
from tactician.core.types import D2, D4, D5, E1, E4, F2
from tactician.puzzles.corpus import Puzzle, PuzzleCorpus
from tactician.puzzles.session import PuzzleOutcome, TrainerSession
from tactician.ui.main_window import TrainerWindow
from tactician.ui.settings import TrainerSettings

ROOK_PUZZLE = Puzzle("4k3/8/8/3q4/8/8/3R4/4K3 w - - 0 1", "Rxd5")
KNIGHT_PUZZLE = Puzzle("4k3/8/2n5/8/3Q4/8/8/4K3 b - - 0 1", "Nxd4")


def _make_window(
    puzzle: Puzzle = ROOK_PUZZLE, settings: TrainerSettings | None = None
) -> TrainerWindow:
    corpus = PuzzleCorpus([ROOK_PUZZLE, KNIGHT_PUZZLE], random.Random(5))
    return TrainerWindow(TrainerSession(corpus, puzzle), settings)


def _play(window: TrainerWindow, move: Move) -> None:
    window.board_view.move_requested.emit(move)


class TestInitialDisplay:
    def test_title_and_prompt(self) -> None:
        window = _make_window()
        assert window.windowTitle() == "Tactician"
        assert window.result_label.text() == "White to move"

    def test_black_prompt(self) -> None:
        window = _make_window(KNIGHT_PUZZLE)
        assert window.result_label.text() == "Black to move"

    def test_status_shows_puzzle_number(self) -> None:
        window = _make_window(KNIGHT_PUZZLE)
        assert window._status_label.text() == "Puzzle 2 of 2"

    def test_board_shows_puzzle(self) -> None:
        window = _make_window()
        assert len(window.board_view.board_scene._pieces) == 4

    def test_buttons_for_pending(self) -> None:
        window = _make_window()
        panel = window.control_panel
        assert not panel._btn_give_up.isHidden()
        assert panel._btn_retry.isHidden()
        assert not panel._btn_next.isHidden()


class TestGrading:
    def test_correct_move(self) -> None:
        window = _make_window()
        _play(window, Move(D2, D5))

        assert window.session.outcome == PuzzleOutcome.SOLVED
        assert window.result_label.text() == "Correct!"
        assert window.result_label.property("result") == "success"
        assert window.control_panel._btn_give_up.isHidden()
        assert window.control_panel._btn_retry.isHidden()
        assert not window.board_view.board_scene._interactive

    def test_wrong_move(self) -> None:
        window = _make_window()
        _play(window, Move(D2, D4))

        assert window.result_label.text() == "Incorrect, try again"
        assert window.result_label.property("result") == "fail"
        assert not window.control_panel._btn_retry.isHidden()
        assert not window.control_panel._btn_give_up.isHidden()

    def test_rejected_move_changes_nothing(self) -> None:
        window = _make_window()
        _play(window, Move(D2, E4))
        assert window.session.outcome == PuzzleOutcome.PENDING
        assert window.result_label.text() == "White to move"

    def test_last_move_highlighted(self) -> None:
        window = _make_window()
        _play(window, Move(E1, F2))
        assert len(window.board_view.board_scene._last_move_marks.items) == 2


class TestActions:
    def test_give_up_shows_answer(self) -> None:
        window = _make_window()
        window.control_panel.give_up_clicked.emit()

        assert window.session.outcome == PuzzleOutcome.REVEALED
        assert window.result_label.text() == "Answer: Rxd5"
        assert window.result_label.property("result") == ""

    def test_retry_after_failure(self) -> None:
        window = _make_window()
        _play(window, Move(D2, D4))
        window.control_panel.retry_clicked.emit()

        assert window.session.outcome == PuzzleOutcome.PENDING
        assert window.result_label.text() == "White to move"
        assert window.control_panel._btn_retry.isHidden()
        assert window.board_view.board_scene._interactive
        assert window.board_view.board_scene._last_move_marks.items == []

    def test_next_loads_puzzle_from_corpus(self) -> None:
        window = _make_window()
        _play(window, Move(D2, D5))
        window.control_panel.next_clicked.emit()

        assert window.session.outcome == PuzzleOutcome.PENDING
        assert window.session.puzzle in window.session.corpus
        assert window.result_label.text() in ("White to move", "Black to move")

    def test_flip(self) -> None:
        window = _make_window()
        window.control_panel.flip_clicked.emit()
        assert window.board_view.board_scene.is_flipped()
        window.control_panel.flip_clicked.emit()
        assert not window.board_view.board_scene.is_flipped()

    def test_board_uses_session_destinations(self) -> None:
        window = _make_window()
        _play(window, Move(D2, D4))
        # Locked after a result even for the side to move
        scene = window.board_view.board_scene
        assert scene._move_between(E1, F2) is None


class TestSettings:
    def test_russian_language(self) -> None:
        window = _make_window(settings=TrainerSettings(language="Russian"))
        assert window.result_label.text() == "Ход белых"
        assert window.control_panel._btn_retry.text() == "Ещё раз"
        assert window._status_label.text() == "Задача 1 из 2"

    def test_apply_settings_updates_scene(self) -> None:
        window = _make_window()
        window.apply_settings(TrainerSettings(show_coordinates=False, board_theme="Blue"))
        scene = window.board_view.board_scene
        assert all(not item.isVisible() for item in scene._labels)
        assert len(scene._pieces) == 4


class TestLifecycle:
    def test_close_detaches_session_callbacks(self) -> None:
        window = _make_window()
        events = window.session.events
        assert len(events.on_position_changed) == 1
        window.close()
        assert events.on_position_changed == []
        assert events.on_outcome == []
