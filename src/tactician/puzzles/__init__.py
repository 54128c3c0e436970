"""Puzzle layer — corpus, PGN import and the trainer session.

Quick start::

    from tactician.puzzles import PuzzleCorpus, TrainerSession

    session = TrainerSession(PuzzleCorpus.bundled())
    session.submit_move(from_sq, to_sq)
    print(session.outcome)
"""

from tactician.puzzles.corpus import Puzzle, PuzzleCorpus, is_supported_solution
from tactician.puzzles.pgn_import import puzzles_from_pgn
from tactician.puzzles.session import PuzzleOutcome, SessionEvents, TrainerSession

__all__ = [
    "Puzzle",
    "PuzzleCorpus",
    "PuzzleOutcome",
    "SessionEvents",
    "TrainerSession",
    "is_supported_solution",
    "puzzles_from_pgn",
]
