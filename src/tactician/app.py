"""Application entry point.

Usage::

    tactician --corpus puzzles.json --seed 7 --language Russian
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tactician.puzzles.corpus import PuzzleCorpus
from tactician.ui.i18n import LANGUAGES
from tactician.ui.settings import TrainerSettings
from tactician.ui.styles.theme import THEME_NAMES

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tactician", description="Solve one-move chess tactics puzzles."
    )
    parser.add_argument(
        "--corpus",
        type=Path,
        default=None,
        help="JSON puzzle corpus (default: the bundled one)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for puzzle selection"
    )
    parser.add_argument("--language", choices=LANGUAGES, default="English")
    parser.add_argument("--theme", choices=THEME_NAMES, default="Classic")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> TrainerSettings:
    """Translate parsed command-line options into settings."""
    return TrainerSettings(
        language=args.language,
        board_theme=args.theme,
        corpus_path=args.corpus,
        seed=args.seed,
    )


def load_corpus(settings: TrainerSettings) -> PuzzleCorpus:
    """Load the configured corpus, or the bundled one."""
    rng = random.Random(settings.seed)
    if settings.corpus_path is None:
        return PuzzleCorpus.bundled(rng)
    return PuzzleCorpus.from_json(settings.corpus_path, rng)


def main(argv: list[str] | None = None) -> int:
    """Launch the Tactician application."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from tactician.puzzles.session import TrainerSession
    from tactician.ui.bootstrap import run_application

    settings = settings_from_args(args)
    try:
        session = TrainerSession(load_corpus(settings))
    except (OSError, ValueError) as exc:
        _LOGGER.error("Cannot load puzzle corpus: %s", exc)
        return 1

    return run_application(session, settings, [sys.argv[0]])


if __name__ == "__main__":
    sys.exit(main())
