"""Test configuration: headless Qt, a shared application and per-test isolation."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

_DISPLAY_VARS = ("QT_QPA_PLATFORM", "DISPLAY", "WAYLAND_DISPLAY")


def pytest_configure(config: pytest.Config) -> None:
    # Without a display server Qt needs the offscreen platform plugin.
    if sys.platform.startswith("linux") and not any(v in os.environ for v in _DISPLAY_VARS):
        os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """The one QApplication every widget and scene in the suite lives in."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _english_strings() -> Iterator[None]:
    from tactician.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Tests under ``tests/ui`` get the application and leave no windows open."""
    if "ui" not in request.node.path.parts:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in app.topLevelWidgets():
        widget.close()
    app.processEvents()
