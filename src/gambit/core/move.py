"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import CastleSide, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square, square_name

_PROMOTION_TYPES = frozenset(
    (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Allowed combinations of the optional parts:

    * ``captured`` and ``promotion`` may appear together (capture-promotion).
    * ``castle`` stands alone: no capture, promotion, en passant or double push.
    * ``en_passant`` always captures a pawn and never promotes.
    * ``double_push`` is a quiet pawn move.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    promotion: PieceType | None = None
    castle: CastleSide | None = None
    en_passant: bool = False
    double_push: bool = False

    def __post_init__(self) -> None:
        if self.promotion is not None and self.promotion not in _PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {self.promotion.name}")
        if self.castle is not None and (
            self.captured is not None
            or self.promotion is not None
            or self.en_passant
            or self.double_push
        ):
            raise ValueError("A castling move cannot capture, promote or push a pawn")
        if self.en_passant and (self.promotion is not None or self.double_push):
            raise ValueError("An en passant capture cannot promote or double push")
        if self.double_push and (self.captured is not None or self.promotion is not None):
            raise ValueError("A double pawn push cannot capture or promote")

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += self.promotion.letter
        return base
