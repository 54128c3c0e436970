"""Pseudo-legal move generation.

Destinations obey piece movement, capture and blocking rules and the
board edges. Nothing here looks at king safety: a returned destination may
leave the mover's own king attacked. Castling, en passant and promotion are
not generated.

Destination order is deterministic. Directions are ``(d_row, d_col)`` with
row 0 at the top of the board and are walked in the order of the tables
below; a pawn yields its forward squares before its two capture diagonals
(towards file a first).
"""

from __future__ import annotations

from tactician.core.board import Board
from tactician.core.enums import Color, PieceType
from tactician.core.move import Move
from tactician.core.piece import Piece
from tactician.core.types import Square, is_on_board

Direction = tuple[int, int]
Ray = tuple[Square, ...]
RayTable = tuple[tuple[Ray, ...], ...]

BISHOP_DIRS: tuple[Direction, ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))
ROOK_DIRS: tuple[Direction, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
QUEEN_DIRS: tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS
KING_OFFSETS: tuple[Direction, ...] = QUEEN_DIRS

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

# White pawns advance towards row 0, black pawns towards row 7.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}

_UNLIMITED = 8


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays(directions: tuple[Direction, ...]) -> RayTable:
    """For every square (row-major index) the full-length ray per direction."""
    rays_per_square: list[tuple[Ray, ...]] = []
    for row in range(8):
        for col in range(8):
            square_rays: list[Ray] = []
            for dr, dc in directions:
                r, c = row + dr, col + dc
                ray: list[Square] = []
                while is_on_board(r, c):
                    ray.append(Square(r, c))
                    r += dr
                    c += dc
                square_rays.append(tuple(ray))
            rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _pawn_rays(color: Color) -> tuple[RayTable, RayTable]:
    """Forward push rays and the two capture diagonals for *color*'s pawns."""
    step = PAWN_DIRECTION[color]
    return _build_rays(((step, 0),)), _build_rays(((step, -1), (step, 1)))


_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)
_KING_RAYS = _build_rays(KING_OFFSETS)
_KNIGHT_RAYS = _build_rays(KNIGHT_OFFSETS)
_PAWN_RAYS = {color: _pawn_rays(color) for color in Color}


def _index(sq: Square) -> int:
    return sq.row * 8 + sq.col


class MoveGenerator:
    """Generates pseudo-legal destinations for pieces on a :class:`Board`.

    The generator never mutates the board.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def destinations(self, from_sq: Square) -> list[Square]:
        """Destination squares for the piece on *from_sq* (empty if none)."""
        piece = self._board[from_sq]
        if piece is None:
            return []

        idx = _index(from_sq)
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            return self._gen_pawn(from_sq, piece)
        if pt == PieceType.KNIGHT:
            return self._walk(piece, _KNIGHT_RAYS[idx], 1)
        if pt == PieceType.BISHOP:
            return self._walk(piece, _BISHOP_RAYS[idx])
        if pt == PieceType.ROOK:
            return self._walk(piece, _ROOK_RAYS[idx])
        if pt == PieceType.QUEEN:
            return self._walk(piece, _QUEEN_RAYS[idx])
        return self._walk(piece, _KING_RAYS[idx], 1)

    def generate_moves(self, color: Color | None = None) -> list[Move]:
        """Every pseudo-legal move, origins scanned row-major.

        With *color* set only that side's pieces are considered.
        """
        moves: list[Move] = []
        for from_sq, piece in self._board.occupied():
            if color is not None and piece.color != color:
                continue
            moves.extend(Move(from_sq, to_sq) for to_sq in self.destinations(from_sq))
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _walk(
        self,
        mover: Piece,
        rays: tuple[Ray, ...],
        max_distance: int = _UNLIMITED,
    ) -> list[Square]:
        board = self._board
        targets: list[Square] = []
        for ray in rays:
            for to_sq in ray[:max_distance]:
                target = board[to_sq]
                if target is None:
                    targets.append(to_sq)
                    continue
                if target.color != mover.color:
                    targets.append(to_sq)
                break
        return targets

    def _gen_pawn(self, from_sq: Square, pawn: Piece) -> list[Square]:
        board = self._board
        push_rays, capture_rays = _PAWN_RAYS[pawn.color]
        idx = _index(from_sq)

        reach = 2 if from_sq.row == PAWN_START_ROW[pawn.color] else 1
        # A ray stops on its first occupant, so the double step is only
        # reachable across an empty intermediate square.
        forward = [
            sq for sq in self._walk(pawn, push_rays[idx], reach) if board.is_empty(sq)
        ]
        captures = [
            sq for sq in self._walk(pawn, capture_rays[idx], 1) if not board.is_empty(sq)
        ]
        return forward + captures


def available_destinations(board: Board, from_sq: Square) -> list[Square]:
    """Pseudo-legal destinations of the piece on *from_sq*."""
    return MoveGenerator(board).destinations(from_sq)
