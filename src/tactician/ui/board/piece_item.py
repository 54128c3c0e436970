"""PieceItem — a chess glyph that can be lifted and dragged."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from tactician.core.enums import Color
from tactician.core.piece import Piece
from tactician.core.types import Square
from tactician.ui.styles.theme import BoardTheme

_Z_RESTING = 1
_Z_LIFTED = 10


class PieceItem(QGraphicsSimpleTextItem):
    """One piece, drawn as the solid Unicode glyph of its role.

    Both sides use the solid glyph, filled with the theme's colour for the
    side and outlined in the other one. The item only becomes movable
    between :meth:`lift` and :meth:`drop` / :meth:`snap_back`.
    """

    def __init__(
        self, piece: Piece, square: Square, tile_size: int, theme: BoardTheme
    ) -> None:
        super().__init__(Piece(Color.BLACK, piece.piece_type).symbol)
        self.piece = piece
        self.square = square
        self._rest_pos: QPointF | None = None

        white = piece.color == Color.WHITE
        self.setBrush(QBrush(theme.white_piece if white else theme.black_piece))
        self.setPen(QPen(theme.black_piece if white else theme.white_piece, 1.0))
        self.setFont(QFont("DejaVu Sans", int(tile_size * 0.6)))
        self._settle()

    def offset_in_tile(self, tile_size: int) -> QPointF:
        """Top-left offset that centres the glyph inside a tile."""
        box = self.boundingRect()
        return QPointF((tile_size - box.width()) / 2, (tile_size - box.height()) / 2)

    def lift(self) -> None:
        """Pick the piece up: it follows the mouse until put down."""
        self._rest_pos = self.pos()
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, True)
        self.setZValue(_Z_LIFTED)
        self.setOpacity(0.85)
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))

    def drop(self) -> None:
        """Put the piece down where it is."""
        self._settle()

    def snap_back(self) -> None:
        """Return the piece to where it was lifted from."""
        if self._rest_pos is not None:
            self.setPos(self._rest_pos)
        self._settle()

    def _settle(self) -> None:
        self._rest_pos = None
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setZValue(_Z_RESTING)
        self.setOpacity(1.0)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
