"""Convert a PGN puzzle collection into the JSON corpus format.

Each game must carry a ``FEN`` header; its first mainline move is the
solution. Games whose solution the trainer cannot grade are dropped.

Usage::

    tactician-import problems.pgn puzzles.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from tactician.core.notation import parse_pgn_game, split_pgn_games
from tactician.puzzles.corpus import Puzzle, is_supported_solution

_LOGGER = logging.getLogger(__name__)


def puzzles_from_pgn(pgn_text: str) -> list[Puzzle]:
    """Extract supported puzzles from a multi-game PGN document."""
    puzzles: list[Puzzle] = []
    for game_text in split_pgn_games(pgn_text):
        parsed = parse_pgn_game(game_text)
        fen = parsed.headers.get("FEN")
        if fen is None or not parsed.moves:
            _LOGGER.debug("Skipping game without FEN or moves: %s", parsed.headers)
            continue
        solution = parsed.moves[0]
        if not is_supported_solution(solution):
            _LOGGER.debug("Skipping unsupported solution %r", solution)
            continue
        puzzles.append(Puzzle(fen=fen, solution=solution))
    return puzzles


def write_corpus(puzzles: list[Puzzle], path: Path) -> None:
    """Write *puzzles* to *path* as an indented JSON list."""
    records = [p.to_record() for p in puzzles]
    path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert a PGN puzzle file into a JSON puzzle corpus"
    )
    parser.add_argument("input", type=Path, help="PGN file with FEN headers")
    parser.add_argument("output", type=Path, help="JSON corpus to write")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(message)s")

    try:
        pgn_text = args.input.read_text(encoding="utf-8")
        puzzles = puzzles_from_pgn(pgn_text)
        write_corpus(puzzles, args.output)
    except (OSError, ValueError) as exc:
        _LOGGER.error("Import failed: %s", exc)
        return 1

    games = len(split_pgn_games(pgn_text))
    _LOGGER.info("Kept %d of %d games -> %s", len(puzzles), games, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
