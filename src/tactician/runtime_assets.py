"""Locations of data files installed with the package."""

from __future__ import annotations

from pathlib import Path

ASSETS_DIR = Path(__file__).resolve().parent / "assets"

BUNDLED_CORPUS = "puzzles.json"


def asset_path(*parts: str) -> Path:
    """Absolute path of a file under the package ``assets`` directory."""
    return ASSETS_DIR.joinpath(*parts)


def bundled_corpus_path() -> Path:
    """The JSON puzzle corpus shipped with the application."""
    path = asset_path(BUNDLED_CORPUS)
    if not path.is_file():
        raise FileNotFoundError(f"Bundled puzzle corpus is missing: {path}")
    return path
