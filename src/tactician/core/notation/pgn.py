"""PGN reading: header tags and mainline move tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass

_TAG_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]$')
_ESCAPE_RE = re.compile(r"\\(.)")
# Brace comments (possibly unterminated), rest-of-line comments,
# variation brackets, and everything else up to the next delimiter.
_MOVETEXT_RE = re.compile(r"\{[^}]*\}?|;[^\n]*|[()]|[^\s{};()]+")
_MOVE_NUMBER_RE = re.compile(r"^\d+\.+")

RESULTS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})


@dataclass(slots=True)
class ParsedPgn:
    """Headers, mainline SAN tokens and result of a single PGN game."""

    headers: dict[str, str]
    moves: list[str]
    result_token: str


def _read_tag(line: str) -> tuple[str, str]:
    match = _TAG_RE.match(line)
    if match is None:
        raise ValueError(f"Invalid PGN header line: {line}")
    name, value = match.groups()
    return name, _ESCAPE_RE.sub(r"\1", value)


def _mainline(movetext: str) -> tuple[list[str], str | None]:
    """SAN tokens outside variations, and the result token if one is present."""
    moves: list[str] = []
    result: str | None = None
    depth = 0

    for match in _MOVETEXT_RE.finditer(movetext):
        token = match.group()
        if token[0] in "{;":
            continue
        if token == "(":
            depth += 1
        elif token == ")":
            depth = max(0, depth - 1)
        elif depth:
            continue
        elif token in RESULTS:
            result = token
        elif not token.startswith("$"):
            # "12." on its own, or glued to the move as in "1...Qxf2".
            # Annotation glyphs such as "!" and "?!" are not part of the move.
            san = _MOVE_NUMBER_RE.sub("", token).lstrip(".").rstrip("!?")
            if san:
                moves.append(san)

    return moves, result


def parse_pgn_game(pgn_text: str) -> ParsedPgn:
    """Parse one game. Tags must come before the movetext."""
    headers: dict[str, str] = {}
    movetext: list[str] = []

    for line in (raw.strip() for raw in pgn_text.splitlines()):
        if not line or line.startswith("%"):
            continue
        if not movetext and line.startswith("["):
            name, value = _read_tag(line)
            headers[name] = value
        else:
            movetext.append(line)

    moves, result = _mainline("\n".join(movetext))
    if result is None or result == "*":
        tagged = headers.get("Result")
        result = tagged if tagged in RESULTS else result or "*"
    return ParsedPgn(headers=headers, moves=moves, result_token=result)


def split_pgn_games(pgn_text: str) -> list[str]:
    """Split a multi-game PGN document into one text chunk per game.

    A new game starts at a tag line that follows movetext.
    """
    games: list[list[str]] = [[]]
    in_movetext = False

    for raw in pgn_text.splitlines():
        line = raw.strip()
        is_tag = line.startswith("[")
        if is_tag and in_movetext:
            games.append([])
            in_movetext = False
        elif line and not is_tag:
            in_movetext = True
        games[-1].append(raw)

    return ["\n".join(lines) for lines in games if any(s.strip() for s in lines)]
