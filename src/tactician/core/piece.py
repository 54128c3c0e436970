"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from tactician.core.enums import Color, PieceType

# Lowercase role letters of position strings; uppercase means white.
_ROLE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_LETTER_ROLES: dict[str, PieceType] = {v: k for k, v in _ROLE_LETTERS.items()}

# (white, black) glyphs
_GLYPHS: dict[PieceType, tuple[str, str]] = {
    PieceType.PAWN: ("♙", "♟"),
    PieceType.KNIGHT: ("♘", "♞"),
    PieceType.BISHOP: ("♗", "♝"),
    PieceType.ROOK: ("♖", "♜"),
    PieceType.QUEEN: ("♕", "♛"),
    PieceType.KING: ("♔", "♚"),
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A role with an explicit color.

    Letter case only encodes color at the position-string boundary
    (:meth:`from_char` / ``str()``); everywhere else the color is a field.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Position-string letter, e.g. ``N`` for a white knight."""
        letter = _ROLE_LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a position-string letter, e.g. ``'q'`` → black queen."""
        role = _LETTER_ROLES.get(char.lower()) if len(char) == 1 else None
        if role is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, role)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        white, black = _GLYPHS[self.piece_type]
        return white if self.color == Color.WHITE else black
