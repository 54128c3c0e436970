"""Position-string (FEN subset) parsing and serialization."""

from __future__ import annotations

from tactician.core.board import Board
from tactician.core.enums import Color
from tactician.core.piece import Piece
from tactician.core.position import Position
from tactician.core.types import Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq"

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def position_from_fen(fen: str) -> Position:
    """Parse ``<ranks> <w|b> <castling>`` into a :class:`Position`.

    A full six-field FEN is accepted as well; the en-passant and clock
    fields are discarded. The castling token is kept as-is.
    """
    parts = fen.split()
    if not (3 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 3-6 fields): {fen!r}")

    placement, side_part, castling_part = parts[:3]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    side = _SIDES.get(side_part)
    if side is None:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    return Position(board, side, castling_part)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to its three-field position string."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = pos.board[Square(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)

    return f"{'/'.join(rows)} {pos.active_color.fen_char} {pos.castling_rights}"
