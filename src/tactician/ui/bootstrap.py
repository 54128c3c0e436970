"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from tactician.puzzles.session import TrainerSession
    from tactician.ui.settings import TrainerSettings

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from tactician.ui.styles.theme import APP_STYLE

    app.setApplicationName("Tactician")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    session: TrainerSession,
    settings: TrainerSettings | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from tactician.ui.main_window import TrainerWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = TrainerWindow(session, settings)
    window.show()
    _LOGGER.info("Trainer started with %d puzzles", len(session.corpus))

    return app.exec()
