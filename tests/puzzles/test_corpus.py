"""Tests for Puzzle records and PuzzleCorpus."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path

import pytest

from tactician.core.enums import Color
from tactician.core.notation import move_to_san, parse_san
from tactician.puzzles.corpus import Puzzle, PuzzleCorpus, is_supported_solution

FEN_ROOK = "4k3/8/8/3q4/8/8/3R4/4K3 w - - 0 1"
FEN_PAWN = "4k3/8/8/3n4/4P3/8/8/4K3 w - - 0 1"


class TestIsSupportedSolution:
    @pytest.mark.parametrize("san", ["e4", "exd5", "Nf3", "Rfd1", "R1xa3"])
    def test_plain_moves_supported(self, san: str) -> None:
        assert is_supported_solution(san)

    @pytest.mark.parametrize("san", ["e8=Q", "O-O", "O-O-O", "0-0", "Qh7+", "Qh7#"])
    def test_unsupported_vocabulary(self, san: str) -> None:
        assert not is_supported_solution(san)


class TestPuzzle:
    def test_position_parses_fen(self) -> None:
        puzzle = Puzzle(FEN_ROOK, "Rxd5")
        assert puzzle.position().active_color == Color.WHITE

    def test_position_is_fresh_each_time(self) -> None:
        puzzle = Puzzle(FEN_ROOK, "Rxd5")
        assert puzzle.position() is not puzzle.position()

    def test_record_round_trip(self) -> None:
        puzzle = Puzzle(FEN_ROOK, "Rxd5")
        assert Puzzle.from_record(puzzle.to_record()) == puzzle

    @pytest.mark.parametrize(
        "record",
        [
            {"fen": FEN_ROOK},
            {"solution": "Rxd5"},
            {"fen": FEN_ROOK, "solution": ""},
            {"fen": 42, "solution": "Rxd5"},
            {"fen": "8/8/8 w -", "solution": "e4"},
            {"fen": "not a fen", "solution": "e4"},
            ["not", "a", "mapping"],
        ],
    )
    def test_malformed_record_raises(self, record: object) -> None:
        with pytest.raises(ValueError, match="Invalid puzzle record"):
            Puzzle.from_record(record)  # type: ignore[arg-type]


class TestPuzzleCorpus:
    def test_unsupported_puzzles_dropped(self) -> None:
        corpus = PuzzleCorpus(
            [Puzzle(FEN_ROOK, "Rxd5"), Puzzle(FEN_ROOK, "Rd8+"), Puzzle(FEN_PAWN, "O-O")]
        )
        assert list(corpus) == [Puzzle(FEN_ROOK, "Rxd5")]

    def test_skipped_puzzle_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="tactician.puzzles.corpus"):
            PuzzleCorpus([Puzzle(FEN_ROOK, "Rxd5"), Puzzle(FEN_ROOK, "Rd8+")])
        assert "Skipping unsupported solution 'Rd8+'" in caplog.text

    def test_record_with_bad_position_rejected_at_load(self) -> None:
        with pytest.raises(ValueError, match="Invalid puzzle record"):
            PuzzleCorpus.from_records(
                [{"fen": FEN_ROOK, "solution": "Rxd5"}, {"fen": "8/8/8 w -", "solution": "e4"}]
            )

    def test_empty_corpus_raises(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            PuzzleCorpus([Puzzle(FEN_ROOK, "e8=Q")])

    def test_sequence_protocol(self) -> None:
        puzzles = [Puzzle(FEN_ROOK, "Rxd5"), Puzzle(FEN_PAWN, "exd5")]
        corpus = PuzzleCorpus(puzzles)
        assert len(corpus) == 2
        assert corpus[1] == puzzles[1]
        assert corpus.index(puzzles[1]) == 1
        assert puzzles[0] in corpus

    def test_random_puzzle_is_reproducible_with_seed(self) -> None:
        puzzles = [Puzzle(FEN_ROOK, "Rxd5"), Puzzle(FEN_PAWN, "exd5")] * 5
        first = PuzzleCorpus(puzzles, random.Random(7))
        second = PuzzleCorpus(puzzles, random.Random(7))
        picks = [first.random_puzzle() for _ in range(20)]
        assert picks == [second.random_puzzle() for _ in range(20)]
        assert all(p in puzzles for p in picks)

    def test_from_json(self, tmp_path: Path) -> None:
        path = tmp_path / "corpus.json"
        path.write_text(
            json.dumps(
                [
                    {"fen": FEN_ROOK, "solution": "Rxd5"},
                    {"fen": FEN_PAWN, "solution": "exd5+"},
                ]
            ),
            encoding="utf-8",
        )
        corpus = PuzzleCorpus.from_json(path)
        assert list(corpus) == [Puzzle(FEN_ROOK, "Rxd5")]

    def test_from_json_requires_list(self, tmp_path: Path) -> None:
        path = tmp_path / "corpus.json"
        path.write_text(json.dumps({"fen": FEN_ROOK}), encoding="utf-8")
        with pytest.raises(ValueError, match="JSON list"):
            PuzzleCorpus.from_json(path)

    def test_from_json_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            PuzzleCorpus.from_json(tmp_path / "missing.json")

    def test_from_json_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "corpus.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            PuzzleCorpus.from_json(path)


class TestBundledCorpus:
    def test_loads(self) -> None:
        assert len(PuzzleCorpus.bundled()) > 0

    def test_every_solution_round_trips(self) -> None:
        for puzzle in PuzzleCorpus.bundled():
            board = puzzle.position().board
            move = parse_san(board, puzzle.solution)
            assert move is not None, puzzle
            assert move_to_san(board, move.from_sq, move.to_sq) == puzzle.solution

    def test_solution_belongs_to_side_to_move(self) -> None:
        for puzzle in PuzzleCorpus.bundled():
            position = puzzle.position()
            move = parse_san(position.board, puzzle.solution)
            assert move is not None
            piece = position.board[move.from_sq]
            assert piece is not None and piece.color == position.active_color, puzzle
