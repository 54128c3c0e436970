"""Board colour schemes and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

# Overlays are translucent, so every board shares them.
_SELECTED = QColor(246, 246, 105, 110)
_TARGET = QColor(20, 85, 30, 60)
_LAST_MOVE = QColor(205, 210, 106, 120)
_WHITE_INK = QColor(250, 250, 250)
_BLACK_INK = QColor(24, 24, 24)


@dataclass(frozen=True)
class BoardTheme:
    """Colours used to paint the board and pieces."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece
    highlight_to: QColor  # destinations of the selected piece
    last_move_from: QColor
    last_move_to: QColor
    coord_light: QColor  # label ink on light squares
    coord_dark: QColor  # label ink on dark squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def from_squares(cls, light: QColor, dark: QColor) -> BoardTheme:
        """Theme for a square palette; labels use the opposite square colour."""
        return cls(
            light_square=light,
            dark_square=dark,
            highlight_from=_SELECTED,
            highlight_to=_TARGET,
            last_move_from=_LAST_MOVE,
            last_move_to=_LAST_MOVE,
            coord_light=dark,
            coord_dark=light,
            white_piece=_WHITE_INK,
            black_piece=_BLACK_INK,
        )

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.from_squares(QColor(240, 217, 181), QColor(181, 136, 99))

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls.from_squares(QColor(222, 227, 230), QColor(140, 162, 173))

    @classmethod
    def green(cls) -> BoardTheme:
        return cls.from_squares(QColor(238, 238, 210), QColor(118, 150, 86))

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Preset by display name; unknown names give the default theme."""
        presets = {"Classic": cls.default, "Blue": cls.blue, "Green": cls.green}
        return presets.get(name, cls.default)()


THEME_NAMES: tuple[str, ...] = ("Classic", "Blue", "Green")


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow, QStatusBar {
    background: #262421;
}

QLabel {
    color: #bababa;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#resultLabel {
    color: #e8e6e3;
    font-size: 18px;
    font-weight: bold;
    padding: 12px 8px;
    border-radius: 6px;
    background: #312e2b;
}
QLabel#resultLabel[result="success"] {
    color: #9ccc65;
}
QLabel#resultLabel[result="fail"] {
    color: #ef5350;
}

QPushButton {
    background: #3a3733;
    color: #e8e6e3;
    border: none;
    border-radius: 6px;
    padding: 8px 16px;
    font-size: 14px;
}
QPushButton:hover {
    background: #4b4844;
}
QPushButton#giveUpButton {
    font-weight: bold;
    min-width: 36px;
}

QMenuBar, QMenu {
    background: #262421;
    color: #bababa;
}
QMenuBar::item:selected, QMenu::item:selected {
    background: #3a3733;
}
"""
