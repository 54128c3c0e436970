"""BoardScene — the puzzle board as a QGraphicsScene."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from tactician.core.move import Move
from tactician.core.move_generator import available_destinations
from tactician.core.position import Position
from tactician.core.types import Square, all_squares, file_char, rank_char
from tactician.ui.board.piece_item import PieceItem
from tactician.ui.styles.theme import BoardTheme

DestinationProvider = Callable[[Square], list[Square]]

# Stacking order of everything drawn on the board
_Z_SQUARES = 0.0
_Z_LABELS = 0.3
_Z_LAST_MOVE = 0.5
_Z_SELECTION = 0.8


class _Overlay:
    """Flat coloured rectangles on one z-level, cleared together."""

    __slots__ = ("_scene", "_z", "items")

    def __init__(self, scene: QGraphicsScene, z: float) -> None:
        self._scene = scene
        self._z = z
        self.items: list[QGraphicsRectItem] = []

    def mark(self, rect: QRectF, color: QColor) -> QGraphicsRectItem:
        item = self._scene.addRect(rect, QPen(Qt.PenStyle.NoPen), QBrush(color))
        assert item is not None
        item.setZValue(self._z)
        self.items.append(item)
        return item

    def clear(self) -> None:
        for item in self.items:
            self._scene.removeItem(item)
        self.items.clear()


class BoardScene(QGraphicsScene):
    """Draws squares, coordinates, pieces and highlights; turns clicks and
    drags into move requests.

    Which pieces can be picked up, and where they may go, is answered by a
    destination provider. Without one, the side to move may move any of its
    pieces to their pseudo-legal destinations.

    Signals:
        move_requested(Move): The user chose one of the offered destinations.
    """

    move_requested = pyqtSignal(Move)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position: Position | None = None
        self._provider: DestinationProvider = self._side_to_move_destinations
        self._flipped = False
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True
        self._last_move: Move | None = None

        # Current gesture
        self._selected: Square | None = None
        self._targets: list[Square] = []
        self._lifted: PieceItem | None = None

        # Layers
        self._squares = _Overlay(self, _Z_SQUARES)
        self._last_move_marks = _Overlay(self, _Z_LAST_MOVE)
        self._selection_marks = _Overlay(self, _Z_SELECTION)
        self._target_marks = _Overlay(self, _Z_SELECTION)
        self._labels: list[QGraphicsSimpleTextItem] = []
        self._pieces: dict[Square, PieceItem] = {}

        self._rebuild()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Show *position*; any selection in progress is dropped."""
        self._position = position
        self._deselect()
        self._place_pieces()

    def set_destination_provider(self, provider: DestinationProvider | None) -> None:
        """Use *provider* to decide where a picked-up piece may go."""
        self._provider = (
            provider if provider is not None else self._side_to_move_destinations
        )

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._deselect()

    def set_flipped(self, flipped: bool) -> None:
        """Show the board from black's side when *flipped*."""
        self._flipped = flipped
        self._rebuild()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._rebuild()

    def set_show_coordinates(self, visible: bool) -> None:
        self._show_coordinates = visible
        for label in self._labels:
            label.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Toggle the destination markers shown while a piece is selected."""
        self._show_legal_moves = visible
        if visible:
            self._mark_targets()
        else:
            self._target_marks.clear()

    def highlight_last_move(self, move: Move | None) -> None:
        """Tint the origin and destination of *move* (``None`` clears)."""
        self._last_move = move
        self._last_move_marks.clear()
        if move is not None:
            self._last_move_marks.mark(self._tile(move.from_sq), self._theme.last_move_from)
            self._last_move_marks.mark(self._tile(move.to_sq), self._theme.last_move_to)

    # ── Drawing ──────────────────────────────────────────────────────────

    def _rebuild(self) -> None:
        """Redraw everything that depends on orientation or theme."""
        self._draw_squares()
        self._deselect()
        self.highlight_last_move(self._last_move)
        self._place_pieces()

    def _draw_squares(self) -> None:
        self._squares.clear()
        for label in self._labels:
            self.removeItem(label)
        self._labels.clear()

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))
        for sq in all_squares():
            light = (sq.row + sq.col) % 2 == 0
            tile = self._tile(sq)
            self._squares.mark(
                tile, self._theme.light_square if light else self._theme.dark_square
            )

            ink = self._theme.coord_light if light else self._theme.coord_dark
            col, row = self._cell(sq)
            if col == 0:
                self._add_label(rank_char(sq), font, ink, tile.topLeft() + QPointF(2, 1))
            if row == 7:
                self._add_label(
                    file_char(sq), font, ink, tile.bottomRight() - QPointF(12, 16)
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_label(self, text: str, font: QFont, ink: QColor, pos: QPointF) -> None:
        label = QGraphicsSimpleTextItem(text)
        label.setFont(font)
        label.setBrush(QBrush(ink))
        label.setZValue(_Z_LABELS)
        label.setPos(pos)
        label.setVisible(self._show_coordinates)
        self.addItem(label)
        self._labels.append(label)

    def _place_pieces(self) -> None:
        """Replace every piece item with one per occupied square."""
        for item in self._pieces.values():
            self.removeItem(item)
        self._pieces.clear()
        self._lifted = None

        if self._position is None:
            return
        for sq, piece in self._position.board.occupied():
            item = PieceItem(piece, sq, self.TILE, self._theme)
            self.addItem(item)
            item.setPos(self._tile(sq).topLeft() + item.offset_in_tile(self.TILE))
            self._pieces[sq] = item

    # ── Mouse gestures ───────────────────────────────────────────────────
    #
    # Press on a movable piece selects it and lifts it for dragging.
    # Release over a destination, or a second press on one, requests the
    # move. Anything else puts the piece back.

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and self._press(self._square_at(event.scenePos())):
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            self._release(self._square_at(event.scenePos()))
        super().mouseReleaseEvent(event)

    def _press(self, sq: Square | None) -> bool:
        """Handle a press on *sq*; ``True`` when it completed a move."""
        if not self._interactive or self._position is None:
            return False

        if sq is not None and self._selected is not None:
            move = self._move_between(self._selected, sq)
            if move is not None:
                self._request(move)
                return True

        self._select(sq)
        if self._selected is not None and self._selected in self._pieces:
            self._lifted = self._pieces[self._selected]
            self._lifted.lift()
        return False

    def _release(self, sq: Square | None) -> None:
        """Put down the lifted piece over *sq*, or back where it came from."""
        item, self._lifted = self._lifted, None
        if item is None:
            return
        move = self._move_between(item.square, sq) if sq is not None else None
        if move is None:
            item.snap_back()
            return
        item.drop()
        self._request(move)

    def _request(self, move: Move) -> None:
        self._deselect()
        self.move_requested.emit(move)

    # ── Selection ────────────────────────────────────────────────────────

    def _select(self, sq: Square | None) -> None:
        self._deselect()
        if sq is None:
            return
        targets = self._provider(sq)
        if not targets:
            return
        self._selected = sq
        self._targets = targets
        self._selection_marks.mark(self._tile(sq), self._theme.highlight_from)
        self._mark_targets()

    def _mark_targets(self) -> None:
        self._target_marks.clear()
        if not self._show_legal_moves:
            return
        for sq in self._targets:
            self._target_marks.mark(self._tile(sq), self._theme.highlight_to)

    def _deselect(self) -> None:
        self._selected = None
        self._targets = []
        self._selection_marks.clear()
        self._target_marks.clear()

    def _side_to_move_destinations(self, sq: Square) -> list[Square]:
        position = self._position
        if position is None:
            return []
        piece = position.board[sq]
        if piece is None or piece.color != position.active_color:
            return []
        return available_destinations(position.board, sq)

    def _move_between(self, from_sq: Square, to_sq: Square) -> Move | None:
        """The move *from_sq* → *to_sq* if the provider allows it."""
        targets = self._targets if from_sq == self._selected else self._provider(from_sq)
        return Move(from_sq, to_sq) if to_sq in targets else None

    # ── Geometry ─────────────────────────────────────────────────────────

    def _cell(self, sq: Square) -> tuple[int, int]:
        """Board square → on-screen (column, row)."""
        if self._flipped:
            return 7 - sq.col, 7 - sq.row
        return sq.col, sq.row

    def _tile(self, sq: Square) -> QRectF:
        col, row = self._cell(sq)
        t = self.TILE
        return QRectF(col * t, row * t, t, t)

    def _square_at(self, pos: QPointF) -> Square | None:
        """Scene position → board square, ``None`` off the board."""
        col = int(pos.x() // self.TILE)
        row = int(pos.y() // self.TILE)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return Square(7 - row, 7 - col)
        return Square(row, col)
