"""Position - board plus side to move, and the move transition."""

from __future__ import annotations

from dataclasses import dataclass, field

from tactician.core.board import Board
from tactician.core.enums import Color
from tactician.core.move_generator import available_destinations
from tactician.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Board, active color and the castling-rights token.

    ``castling_rights`` is carried verbatim from the position string; it is
    never interpreted and survives every transition unchanged.
    """

    board: Board = field(default_factory=Board.initial)
    active_color: Color = Color.WHITE
    castling_rights: str = "-"


def apply_move(position: Position, from_sq: Square, to_sq: Square) -> Position:
    """Return the position after moving *from_sq* → *to_sq*.

    The move must be one of the pseudo-legal destinations of the piece on
    *from_sq*; otherwise *position* itself is returned and nothing changes.
    Callers detect a rejected move by comparing the result with the input.
    """
    if to_sq not in available_destinations(position.board, from_sq):
        return position

    board = position.board.copy()
    board[to_sq] = board[from_sq]
    board[from_sq] = None
    return Position(
        board=board,
        active_color=position.active_color.opposite,
        castling_rights=position.castling_rights,
    )
