"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES, Square

_EMPTY_CHAR = "."

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid; row 0 is black's back rank, row 7 white's."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._grid[sq[0]][sq[1]] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq[0]][sq[1]] is None

    @property
    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Read-only view of the grid for renderers."""
        return tuple(tuple(row) for row in self._grid)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every piece of *color*, row by row."""
        for sq in ALL_SQUARES:
            piece = self._grid[sq.row][sq.col]
            if piece is not None and piece.color == color:
                yield sq, piece

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None if it is not on the board."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Debug dump ---------------------------------------------------------

    def to_text(self) -> str:
        """Eight lines of piece letters, row 0 first, ``.`` for empty."""
        return "\n".join(
            "".join(str(p) if p else _EMPTY_CHAR for p in row) for row in self._grid
        )

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Inverse of :meth:`to_text`; blank lines and spaces are ignored."""
        lines = [line.replace(" ", "") for line in text.strip().splitlines()]
        lines = [line for line in lines if line]
        if len(lines) != 8 or any(len(line) != 8 for line in lines):
            raise ValueError(f"Board text must be 8 rows of 8 squares: {text!r}")
        b = cls()
        for row, line in enumerate(lines):
            for col, ch in enumerate(line):
                if ch != _EMPTY_CHAR:
                    b[Square(row, col)] = Piece.from_char(ch)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = " ".join(str(p) if p else _EMPTY_CHAR for p in row)
            rows.append(f"{8 - row_idx} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
