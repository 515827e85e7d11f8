"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    Letters (``K`` for a white king, ``k`` for a black one) are only used
    for the debug board dump; everything else goes through the enums.
    """

    color: Color
    piece_type: PieceType

    def is_enemy_of(self, color: Color) -> bool:
        return self.color != color

    # ── Debug serialisation ──────────────────────────────────────────────

    def __str__(self) -> str:
        letter = self.piece_type.letter
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its debug letter, e.g. 'N' → white knight."""
        if len(char) != 1 or not char.isalpha():
            raise ValueError(f"Invalid piece character: {char!r}")
        try:
            ptype = PieceType.parse(char)
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, ptype)
