"""GameState — board plus metadata, with snapshot-based apply/undo."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from gambit.core.board import Board
from gambit.core.enums import CastleSide, CastlingRights, Color, PieceType
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import A1, A8, H1, H8, Square


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Everything :meth:`GameState.undo` needs to rewind one move."""

    board: Board
    turn: Color
    castling: CastlingRights
    en_passant: Square | None
    halfmove_clock: int
    fullmove_number: int


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """A played move together with the state it was played from."""

    snapshot: Snapshot
    move: Move


# Rook home corner -> the right that dies when anything leaves or lands there.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}

# Castle side -> (rook from col, rook to col)
_ROOK_SLIDES: dict[CastleSide, tuple[int, int]] = {
    CastleSide.KING: (7, 5),
    CastleSide.QUEEN: (0, 3),
}


class GameState:
    """Full chess state: board, side to move, castling, en passant, clocks.

    Every :meth:`apply_move` pushes a full :class:`Snapshot` of the prior
    state onto ``history``; :meth:`undo` pops it and restores it verbatim.
    The cost of one apply/undo pair is therefore one 8x8 board copy each
    way, independent of the move played.
    """

    __slots__ = (
        "board",
        "turn",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "history",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.turn = turn
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.history: list[HistoryEntry] = []

    def reset(self) -> None:
        """Back to the standard initial position with an empty history."""
        self.board = Board.initial()
        self.turn = Color.WHITE
        self.castling = CastlingRights.ALL
        self.en_passant = None
        self.halfmove_clock = 0
        self.fullmove_number = 1
        self.history = []

    # ── Snapshots ────────────────────────────────────────────────────────

    def snapshot(self) -> Snapshot:
        """Copy of everything except the history."""
        return Snapshot(
            board=self.board.copy(),
            turn=self.turn,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Reinstate *snapshot*; the history is left alone."""
        self.board = snapshot.board.copy()
        self.turn = snapshot.turn
        self.castling = snapshot.castling
        self.en_passant = snapshot.en_passant
        self.halfmove_clock = snapshot.halfmove_clock
        self.fullmove_number = snapshot.fullmove_number

    # ── Core move operations ─────────────────────────────────────────────

    def apply_move(self, move: Move) -> HistoryEntry:
        """Play *move* without checking legality and record it for undo.

        The recorded move carries the piece that actually moved and the
        piece that was actually captured.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        # En passant: the captured pawn sits beside the origin, not on the target
        if move.en_passant:
            capture_sq = Square(move.from_sq.row, move.to_sq.col)
        else:
            capture_sq = move.to_sq
        captured = board[capture_sq]

        # Checked before any mutation; an inconsistent move raises here
        if move.piece != piece or move.captured != captured:
            move = dataclasses.replace(move, piece=piece, captured=captured)

        snapshot = self.snapshot()
        board[capture_sq] = None
        board[move.to_sq] = piece
        board[move.from_sq] = None

        if move.promotion is not None:
            board[move.to_sq] = Piece(piece.color, move.promotion)

        if move.castle is not None:
            rook_from_col, rook_to_col = _ROOK_SLIDES[move.castle]
            row = move.to_sq.row
            board[Square(row, rook_to_col)] = board[Square(row, rook_from_col)]
            board[Square(row, rook_from_col)] = None

        self._update_castling(move, piece)

        if move.double_push:
            self.en_passant = Square(
                (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col
            )
        else:
            self.en_passant = None

        if piece.piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.turn == Color.BLACK:
            self.fullmove_number += 1

        self.turn = self.turn.opposite

        entry = HistoryEntry(snapshot=snapshot, move=move)
        self.history.append(entry)
        return entry

    def undo(self) -> Move | None:
        """Rewind the last :meth:`apply_move`. Returns None if nothing to undo."""
        if not self.history:
            return None
        entry = self.history.pop()
        self.restore(entry.snapshot)
        return entry.move

    # ── Castling bookkeeping ─────────────────────────────────────────────

    def _update_castling(self, move: Move, piece: Piece) -> None:
        castling = self.castling
        if piece.piece_type == PieceType.KING:
            castling &= ~CastlingRights.for_color(piece.color)

        for sq in (move.from_sq, move.to_sq):
            if sq in _ROOK_CORNERS:
                castling &= ~_ROOK_CORNERS[sq]

        self.castling = castling

    # ── Utilities ────────────────────────────────────────────────────────

    @property
    def ply_count(self) -> int:
        """Number of half-moves in the history."""
        return len(self.history)

    def copy(self) -> GameState:
        """Independent deep copy, history included."""
        state = GameState(
            board=self.board.copy(),
            turn=self.turn,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )
        state.history = self.history.copy()
        return state
