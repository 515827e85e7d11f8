"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Lower-case piece letter, e.g. ``n`` for a knight."""
        return _LETTERS[self]

    @classmethod
    def parse(cls, value: PieceType | str) -> PieceType:
        """Accept a member, a letter (``q``/``Q``) or a name (``queen``)."""
        if isinstance(value, PieceType):
            return value
        text = value.strip().lower()
        for ptype, letter in _LETTERS.items():
            if text in (letter, ptype.name.lower()):
                return ptype
        raise ValueError(f"Invalid piece kind: {value!r}")


_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


class CastleSide(IntEnum):
    """Which wing a castling move goes to."""

    KING = 0
    QUEEN = 1


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, side: CastleSide) -> CastlingRights:
        """The single right for *color* castling towards *side*."""
        if color == Color.WHITE:
            return cls.WHITE_KINGSIDE if side == CastleSide.KING else cls.WHITE_QUEENSIDE
        return cls.BLACK_KINGSIDE if side == CastleSide.KING else cls.BLACK_QUEENSIDE

    @classmethod
    def for_color(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class GameStatus(str, Enum):
    """Status of the side to move."""

    ONGOING = "ongoing"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"

    def __str__(self) -> str:
        return self.value
