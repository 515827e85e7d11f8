"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.enums import CastleSide, CastlingRights, Color, PieceType
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import Square

if TYPE_CHECKING:
    from gambit.core.state import GameState


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# Color -> (row delta of a forward step, starting row, promotion row)
_PAWN_GEOMETRY: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (-1, 6, 0),
    Color.BLACK: (1, 1, 7),
}

_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_KING_HOME_COL = 4

# Castle side -> (king destination col, cols that must be empty, col the king crosses)
_CASTLE_PATHS: dict[CastleSide, tuple[int, tuple[int, ...], int]] = {
    CastleSide.KING: (6, (5, 6), 5),
    CastleSide.QUEEN: (2, (3, 2, 1), 3),
}


class MoveGenerator:
    """Generates moves for the side to move of a :class:`GameState`.

    Legality is checked by playing each candidate on the state and asking
    whether the mover's king is attacked; the state is always restored
    before returning.

    With ``strict_castling`` off (the default) castling candidates only
    need the right and empty squares between king and rook, and the king
    may castle out of or through an attacked square. Turning it on adds
    the standard-rules checks.
    """

    __slots__ = ("_state", "_strict_castling")

    def __init__(self, state: GameState, strict_castling: bool = False) -> None:
        self._state = state
        self._strict_castling = strict_castling

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        state = self._state
        moving_color = state.turn
        legal: list[Move] = []

        for move in self.generate_pseudo_legal_moves():
            state.apply_move(move)
            if not self.is_in_check(moving_color):
                legal.append(move)
            state.undo()
        return legal

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        color = self._state.turn
        for sq, piece in self._state.board.pieces(color):
            self._gen_piece(sq, piece, moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A missing king is never in check.
        """
        king_sq = self._state.board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Could any piece of *by_color* capture on *sq*?

        Uses each piece's capture pattern, so an empty *sq* counts as
        attacked exactly when a piece placed there could be taken.
        """
        board = self._state.board

        # Pawns capture towards the side they move; look one row back from sq.
        forward = _PAWN_GEOMETRY[by_color][0]
        for d_col in (-1, 1):
            src = sq.offset(-forward, d_col)
            if src is not None and board[src] == Piece(by_color, PieceType.PAWN):
                return True

        for offsets, ptype in (
            (KNIGHT_OFFSETS, PieceType.KNIGHT),
            (KING_OFFSETS, PieceType.KING),
        ):
            for d_row, d_col in offsets:
                src = sq.offset(d_row, d_col)
                if src is not None and board[src] == Piece(by_color, ptype):
                    return True

        for dirs, sliders in (
            (BISHOP_DIRS, (PieceType.BISHOP, PieceType.QUEEN)),
            (ROOK_DIRS, (PieceType.ROOK, PieceType.QUEEN)),
        ):
            for d_row, d_col in dirs:
                src = sq.offset(d_row, d_col)
                while src is not None:
                    piece = board[src]
                    if piece is not None:
                        if piece.color == by_color and piece.piece_type in sliders:
                            return True
                        break
                    src = src.offset(d_row, d_col)

        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_piece(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece, KNIGHT_OFFSETS, moves)
        elif ptype == PieceType.KING:
            self._gen_steps(sq, piece, KING_OFFSETS, moves)
            self._gen_castling(sq, piece, moves)
        else:
            self._gen_sliding(sq, piece, _SLIDER_DIRS[ptype], moves)

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._state.board
        forward, start_row, promo_row = _PAWN_GEOMETRY[piece.color]

        one_step = sq.offset(forward, 0)
        if one_step is not None and board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, piece, None, moves, promo_row)
            if sq.row == start_row:
                two_step = Square(sq.row + 2 * forward, sq.col)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step, piece, double_push=True))

        for d_col in (-1, 1):
            cap_sq = sq.offset(forward, d_col)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.is_enemy_of(piece.color):
                self._add_pawn_move(sq, cap_sq, piece, target, moves, promo_row)
            elif cap_sq == self._state.en_passant:
                # The pawn that double-pushed sits beside us, behind the target.
                behind = board[Square(sq.row, cap_sq.col)]
                if (
                    behind is not None
                    and behind.is_enemy_of(piece.color)
                    and behind.piece_type == PieceType.PAWN
                ):
                    moves.append(Move(sq, cap_sq, piece, behind, en_passant=True))

    @staticmethod
    def _add_pawn_move(
        from_sq: Square,
        to_sq: Square,
        piece: Piece,
        captured: Piece | None,
        moves: list[Move],
        promo_row: int,
    ) -> None:
        if to_sq.row == promo_row:
            for pt in PROMOTION_TYPES:
                moves.append(Move(from_sq, to_sq, piece, captured, promotion=pt))
        else:
            moves.append(Move(from_sq, to_sq, piece, captured))

    def _gen_steps(
        self,
        sq: Square,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._state.board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if to_sq is None:
                continue
            target = board[to_sq]
            if target is None or target.is_enemy_of(piece.color):
                moves.append(Move(sq, to_sq, piece, target))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        dirs: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._state.board
        for d_row, d_col in dirs:
            to_sq = sq.offset(d_row, d_col)
            while to_sq is not None:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq, piece))
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.is_enemy_of(piece.color):
                    moves.append(Move(sq, to_sq, piece, target))
                break

    def _gen_castling(self, king_sq: Square, piece: Piece, moves: list[Move]) -> None:
        color = piece.color
        row = _HOME_ROW[color]
        if king_sq != Square(row, _KING_HOME_COL):
            return

        state = self._state
        board = state.board
        opponent = color.opposite
        checked_in_place = False

        for side, (dest_col, empty_cols, transit_col) in _CASTLE_PATHS.items():
            if not state.castling & CastlingRights.for_side(color, side):
                continue
            if not all(board.is_empty(Square(row, col)) for col in empty_cols):
                continue
            if self._strict_castling:
                if not checked_in_place:
                    if self.is_in_check(color):
                        return
                    checked_in_place = True
                if self.is_square_attacked(Square(row, transit_col), opponent):
                    continue
            moves.append(Move(king_sq, Square(row, dest_col), piece, castle=side))
