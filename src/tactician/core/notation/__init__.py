"""Notation package: position strings, move notation and PGN reading."""

from tactician.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from tactician.core.notation.pgn import ParsedPgn, parse_pgn_game, split_pgn_games
from tactician.core.notation.san import move_to_san, parse_san

__all__ = [
    "STARTING_FEN",
    "ParsedPgn",
    "position_from_fen",
    "position_to_fen",
    "move_to_san",
    "parse_san",
    "parse_pgn_game",
    "split_pgn_games",
]
