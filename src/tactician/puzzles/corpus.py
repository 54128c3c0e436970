"""Puzzle records and the read-only corpus they are drawn from."""

from __future__ import annotations

import json
import logging
import random
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tactician.core.notation import position_from_fen
from tactician.core.position import Position
from tactician.runtime_assets import bundled_corpus_path

_LOGGER = logging.getLogger(__name__)

_UNSUPPORTED_MARKERS = ("=", "O-O", "0-0")
_SUFFIXES = ("+", "#")


@dataclass(frozen=True, slots=True)
class Puzzle:
    """A position string and the notation of its single solving move."""

    fen: str
    solution: str

    def position(self) -> Position:
        """Freshly parsed starting position of the puzzle."""
        return position_from_fen(self.fen)

    def to_record(self) -> dict[str, str]:
        return {"fen": self.fen, "solution": self.solution}

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Puzzle:
        try:
            fen = record["fen"]
            solution = record["solution"]
        except (KeyError, TypeError):
            raise ValueError(f"Invalid puzzle record: {record!r}") from None
        if not isinstance(fen, str) or not isinstance(solution, str) or not solution:
            raise ValueError(f"Invalid puzzle record: {record!r}")
        try:
            position_from_fen(fen)
        except ValueError as exc:
            raise ValueError(f"Invalid puzzle record: {record!r} ({exc})") from exc
        return cls(fen=fen, solution=solution)


def is_supported_solution(san: str) -> bool:
    """Whether the move encoder can ever produce *san*.

    Promotions, castling and check/mate suffixes are outside its vocabulary.
    """
    if any(marker in san for marker in _UNSUPPORTED_MARKERS):
        return False
    return not san.endswith(_SUFFIXES)


class PuzzleCorpus(Sequence[Puzzle]):
    """Ordered, read-only collection of supported puzzles.

    Args:
        puzzles: Candidate puzzles; unsupported solutions are dropped.
        rng: Source of randomness for :meth:`random_puzzle`.
    """

    __slots__ = ("_puzzles", "_rng")

    def __init__(
        self, puzzles: Iterable[Puzzle], rng: random.Random | None = None
    ) -> None:
        kept: list[Puzzle] = []
        for puzzle in puzzles:
            if is_supported_solution(puzzle.solution):
                kept.append(puzzle)
            else:
                _LOGGER.info("Skipping unsupported solution %r", puzzle.solution)
        if not kept:
            raise ValueError("Puzzle corpus is empty")
        self._puzzles = tuple(kept)
        self._rng = rng if rng is not None else random.Random()

    # ── Loading ──────────────────────────────────────────────────────────

    @classmethod
    def from_records(
        cls, records: Iterable[Mapping[str, Any]], rng: random.Random | None = None
    ) -> PuzzleCorpus:
        return cls((Puzzle.from_record(r) for r in records), rng)

    @classmethod
    def from_json(cls, path: Path, rng: random.Random | None = None) -> PuzzleCorpus:
        """Load ``[{"fen": ..., "solution": ...}, ...]`` from *path*."""
        records = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(records, list):
            raise ValueError(f"Puzzle corpus must be a JSON list: {path}")
        corpus = cls.from_records(records, rng)
        _LOGGER.info("Loaded %d puzzles from %s", len(corpus), path)
        return corpus

    @classmethod
    def bundled(cls, rng: random.Random | None = None) -> PuzzleCorpus:
        """The corpus shipped with the application."""
        return cls.from_json(bundled_corpus_path(), rng)

    # ── Sequence protocol ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._puzzles)

    def __getitem__(self, index):  # type: ignore[override]
        return self._puzzles[index]

    def __iter__(self) -> Iterator[Puzzle]:
        return iter(self._puzzles)

    # ── Selection ────────────────────────────────────────────────────────

    def random_puzzle(self) -> Puzzle:
        """Uniformly random puzzle."""
        return self._puzzles[self._rng.randrange(len(self._puzzles))]
