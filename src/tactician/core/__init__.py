"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from tactician.core import (
        STARTING_FEN,
        available_destinations,
        parse_square,
        position_from_fen,
    )

    pos = position_from_fen(STARTING_FEN)
    print(available_destinations(pos.board, parse_square("e2")))

Moves are pseudo-legal: king safety, castling, en passant and promotion
are outside this engine.
"""

from tactician.core.board import Board
from tactician.core.enums import Color, PieceType
from tactician.core.move import Move
from tactician.core.move_generator import MoveGenerator, available_destinations
from tactician.core.notation import (
    STARTING_FEN,
    move_to_san,
    parse_san,
    position_from_fen,
    position_to_fen,
)
from tactician.core.piece import Piece
from tactician.core.position import Position, apply_move
from tactician.core.types import Square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    # Operations
    "apply_move",
    "available_destinations",
    # Notation
    "STARTING_FEN",
    "move_to_san",
    "parse_san",
    "position_from_fen",
    "position_to_fen",
]
