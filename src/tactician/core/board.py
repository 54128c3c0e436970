"""Board - piece placement on a fixed 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from tactician.core.enums import Color, PieceType
from tactician.core.piece import Piece
from tactician.core.types import Square, rank_char

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """8x8 grid of optional pieces, indexed by :class:`Square`.

    Cells may be assigned while a board is being built; once a board is
    part of a :class:`~tactician.core.position.Position` it is treated as
    a value and only ever copied.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._cells[sq.row][sq.col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq.row][sq.col] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied cell, row-major."""
        for row, cells in enumerate(self._cells):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Square(row, col), piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*, row-major."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def piece_count(self) -> int:
        return sum(1 for _ in self.occupied())

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._cells):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{rank_char(Square(row, 0))} {text}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
