"""Algebraic move notation: encoding and brute-force decoding.

The grammar is ``[Role][file|rank]['x']<file><rank>``, e.g. ``e4``,
``exd5``, ``Nf3``, ``Rfd1``. Check suffixes, castling and promotion are
never produced.
"""

from __future__ import annotations

from tactician.core.board import Board
from tactician.core.enums import Color, PieceType
from tactician.core.move import Move
from tactician.core.move_generator import MoveGenerator
from tactician.core.piece import Piece
from tactician.core.types import Square, file_char, rank_char, square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def move_to_san(board: Board, from_sq: Square, to_sq: Square) -> str:
    """Notation for moving the piece on *from_sq* to *to_sq* on *board*.

    *board* is the position before the move. Raises :class:`ValueError`
    when *from_sq* is empty.
    """
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(from_sq)}")

    is_capture = not board.is_empty(to_sq)
    dest = square_name(to_sq)

    if piece.piece_type == PieceType.PAWN:
        return f"{file_char(from_sq)}x{dest}" if is_capture else dest

    san = _SAN_PIECE[piece.piece_type] + _disambiguation(board, piece, from_sq, to_sq)
    if is_capture:
        san += "x"
    return san + dest


def _disambiguation(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> str:
    # Only the first twin in row-major order is considered; a second twin
    # that would need file *and* rank is not resolved.
    gen = MoveGenerator(board)
    for sq, other in board.occupied():
        if sq == from_sq or other != piece:
            continue
        if to_sq in gen.destinations(sq):
            return rank_char(from_sq) if sq.col == from_sq.col else file_char(from_sq)
    return ""


def parse_san(board: Board, san: str, color: Color | None = None) -> Move | None:
    """Find the move on *board* whose notation equals *san*.

    Every pseudo-legal move is encoded in row-major origin order and the
    first exact match wins. Pass *color* to search only that side's pieces.
    Returns ``None`` when nothing matches (e.g. castling or promotion).
    """
    for move in MoveGenerator(board).generate_moves(color):
        if move_to_san(board, move.from_sq, move.to_sq) == san:
            return move
    return None
