"""BoardView — the widget showing a BoardScene at any size."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent, QShowEvent
from PyQt6.QtWidgets import QFrame, QGraphicsView, QSizePolicy, QWidget

from tactician.core.move import Move
from tactician.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Owns the board scene and scales it to fit, keeping squares square.

    Signals:
        move_requested(Move): Forwarded from the scene.
    """

    move_requested = pyqtSignal(Move)

    MIN_SIDE = 320

    def __init__(self, parent: QWidget | None = None) -> None:
        self._board = BoardScene()
        super().__init__(self._board, parent)

        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(self.MIN_SIDE, self.MIN_SIDE)

        self._board.move_requested.connect(self.move_requested)

    @property
    def board_scene(self) -> BoardScene:
        return self._board

    def _fit(self) -> None:
        self.fitInView(self._board.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        self._fit()

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit()
