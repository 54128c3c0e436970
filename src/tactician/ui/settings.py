"""User-configurable settings and how they are applied to the window."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tactician.ui.i18n import set_language
from tactician.ui.styles.theme import BoardTheme


@dataclass
class TrainerSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Puzzles
    corpus_path: Path | None = None  # None = bundled corpus
    seed: int | None = None


def apply_settings(host: Any) -> None:
    s: TrainerSettings = host._settings

    # Language must come first so all retranslate calls use the new locale
    set_language(s.language)
    host.retranslate_ui()

    scene = host._board_view.board_scene
    scene.set_theme(BoardTheme.named(s.board_theme))
    scene.set_show_coordinates(s.show_coordinates)
    scene.set_show_legal_moves(s.show_legal_moves)
