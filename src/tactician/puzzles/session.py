"""TrainerSession — orchestrates a single puzzle attempt.

Coordinates: PuzzleCorpus, Position, MoveGenerator, move notation.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from tactician.core.move import Move
from tactician.core.move_generator import available_destinations
from tactician.core.notation import move_to_san, parse_san
from tactician.core.position import Position, apply_move
from tactician.core.types import Square
from tactician.puzzles.corpus import Puzzle, PuzzleCorpus

_LOGGER = logging.getLogger(__name__)


class PuzzleOutcome(IntEnum):
    """Where the current attempt stands."""

    PENDING = auto()
    SOLVED = auto()
    FAILED = auto()
    REVEALED = auto()


# ── Event definitions ────────────────────────────────────────────────────────

PositionCallback = Callable[[Position, Move | None], None]  # position, last move
OutcomeCallback = Callable[[PuzzleOutcome], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_outcome: list[OutcomeCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class TrainerSession:
    """Holds the live position of the current puzzle and grades attempts.

    The position is replaced, never mutated, on every accepted move.
    Methods are meant to be called from a single (UI) thread.
    """

    __slots__ = (
        "_corpus",
        "_puzzle",
        "_position",
        "_outcome",
        "_last_move",
        "events",
    )

    def __init__(self, corpus: PuzzleCorpus, puzzle: Puzzle | None = None) -> None:
        self._corpus = corpus
        self._puzzle = puzzle if puzzle is not None else corpus.random_puzzle()
        self._position = self._puzzle.position()
        self._outcome = PuzzleOutcome.PENDING
        self._last_move: Move | None = None
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def corpus(self) -> PuzzleCorpus:
        return self._corpus

    @property
    def puzzle(self) -> Puzzle:
        return self._puzzle

    @property
    def position(self) -> Position:
        return self._position

    @property
    def outcome(self) -> PuzzleOutcome:
        return self._outcome

    @property
    def last_move(self) -> Move | None:
        return self._last_move

    # ── Puzzle lifecycle ─────────────────────────────────────────────────

    def load(self, puzzle: Puzzle) -> None:
        """Start *puzzle* from its initial position."""
        self._puzzle = puzzle
        self._reset()

    def next_puzzle(self) -> Puzzle:
        """Switch to a random puzzle from the corpus."""
        self.load(self._corpus.random_puzzle())
        return self._puzzle

    def retry(self) -> None:
        """Restart the current puzzle."""
        self._reset()

    # ── Moves ────────────────────────────────────────────────────────────

    def can_move_piece(self, sq: Square) -> bool:
        """Whether the piece on *sq* may be picked up right now."""
        if self._outcome != PuzzleOutcome.PENDING:
            return False
        piece = self._position.board[sq]
        return piece is not None and piece.color == self._position.active_color

    def destinations(self, sq: Square) -> list[Square]:
        """Highlightable targets for the piece on *sq*."""
        if not self.can_move_piece(sq):
            return []
        return available_destinations(self._position.board, sq)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play a move and grade it. Returns False when it was rejected."""
        if not self.can_move_piece(from_sq):
            return False

        before = self._position
        after = apply_move(before, from_sq, to_sq)
        if after is before:
            return False

        san = move_to_san(before.board, from_sq, to_sq)
        outcome = (
            PuzzleOutcome.SOLVED if san == self._puzzle.solution else PuzzleOutcome.FAILED
        )
        _LOGGER.debug("Played %s (solution %s): %s", san, self._puzzle.solution, outcome.name)

        self._set_position(after, Move(from_sq, to_sq))
        self._set_outcome(outcome)
        return True

    def give_up(self) -> Move | None:
        """Reveal the answer by playing the stored solution from the start."""
        if self._outcome == PuzzleOutcome.SOLVED:
            return None

        start = self._puzzle.position()
        move = parse_san(start.board, self._puzzle.solution, start.active_color)
        if move is None:
            _LOGGER.warning(
                "Solution %r does not decode in %s", self._puzzle.solution, self._puzzle.fen
            )
            self._set_position(start, None)
        else:
            self._set_position(apply_move(start, move.from_sq, move.to_sq), move)
        self._set_outcome(PuzzleOutcome.REVEALED)
        return move

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reset(self) -> None:
        self._set_position(self._puzzle.position(), None)
        self._set_outcome(PuzzleOutcome.PENDING)

    def _set_position(self, position: Position, last_move: Move | None) -> None:
        self._position = position
        self._last_move = last_move
        for cb in self.events.on_position_changed:
            cb(position, last_move)

    def _set_outcome(self, outcome: PuzzleOutcome) -> None:
        self._outcome = outcome
        for cb in self.events.on_outcome:
            cb(outcome)
