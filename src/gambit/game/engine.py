"""ChessEngine — the single entry point a front-end drives a game through.

Owns one :class:`GameState`, validates submitted moves against the legal
move set and notifies listeners via simple callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, GameStatus, PieceType
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.core.piece import Piece
from gambit.core.rules import Rules
from gambit.core.state import GameState, HistoryEntry
from gambit.core.types import Square
from gambit.game.config import EngineConfig

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[HistoryEntry], None]
UndoCallback = Callable[[Move], None]
GameOverCallback = Callable[[GameStatus], None]


@dataclass
class EngineEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class ChessEngine:
    """One game of chess: state, move generation, apply/undo, status.

    Not thread-safe. Each public call is one complete state transition;
    a concurrent host must serialise calls per engine instance. Use
    :meth:`copy` for an independent engine (e.g. for analysis).
    """

    __slots__ = ("_state", "_config", "events")

    def __init__(
        self,
        config: EngineConfig | None = None,
        state: GameState | None = None,
    ) -> None:
        self._config = config if config is not None else EngineConfig()
        self._state = state if state is not None else GameState()
        self.events = EngineEvents()

    # ── Read access ──────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def turn(self) -> Color:
        return self._state.turn

    @property
    def castling(self) -> CastlingRights:
        return self._state.castling

    @property
    def en_passant(self) -> Square | None:
        return self._state.en_passant

    @property
    def halfmove_clock(self) -> int:
        return self._state.halfmove_clock

    @property
    def fullmove_number(self) -> int:
        return self._state.fullmove_number

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._state.history)

    @property
    def ply_count(self) -> int:
        return self._state.ply_count

    def piece_at(self, sq: Square) -> Piece | None:
        return self._state.board[sq]

    def board_text(self) -> str:
        """Debug dump of the board, see :meth:`Board.to_text`."""
        return self._state.board.to_text()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Start a new game from the standard initial position."""
        self._state.reset()
        _LOGGER.debug("Engine reset to the initial position")

    def copy(self) -> ChessEngine:
        """Independent engine with a deep copy of the state (no listeners)."""
        return ChessEngine(self._config, self._state.copy())

    # ── Move generation ──────────────────────────────────────────────────

    def pseudo_legal_moves(self) -> list[Move]:
        return self._generator().generate_pseudo_legal_moves()

    def generate_legal_moves(self) -> list[Move]:
        return self._generator().generate_legal_moves()

    def legal_moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq* (empty if none or not its turn)."""
        return [m for m in self.generate_legal_moves() if m.from_sq == sq]

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> HistoryEntry:
        """Play *move* unchecked. Use :meth:`make_move_if_legal` for gameplay."""
        entry = self._state.apply_move(move)
        if self._config.log_moves:
            _LOGGER.debug("Applied %s (ply %d)", entry.move, self._state.ply_count)
        for cb in self.events.on_move:
            cb(entry)
        return entry

    def make_move_if_legal(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | str | None = None,
    ) -> HistoryEntry | None:
        """Play the legal move matching the candidate, or return None.

        A legal move matches when its squares are equal and either neither
        side names a promotion or both name the same kind. Promotion kinds
        may be given as letters or names in any case.
        """
        try:
            wanted = PieceType.parse(promotion) if promotion is not None else None
        except ValueError:
            _LOGGER.debug("Rejected %s%s: bad promotion %r", from_sq, to_sq, promotion)
            return None

        for move in self.generate_legal_moves():
            if move.from_sq != from_sq or move.to_sq != to_sq:
                continue
            if move.promotion == wanted:
                entry = self.apply_move(move)
                self._check_game_over()
                return entry

        _LOGGER.debug(
            "Rejected %s%s%s: no matching legal move",
            from_sq,
            to_sq,
            wanted.letter if wanted is not None else "",
        )
        return None

    def undo(self) -> Move | None:
        """Take back the last move. Returns None when there is nothing to undo."""
        move = self._state.undo()
        if move is None:
            _LOGGER.debug("Nothing to undo")
            return None
        if self._config.log_moves:
            _LOGGER.debug("Undid %s (ply %d)", move, self._state.ply_count)
        for cb in self.events.on_undo:
            cb(move)
        return move

    # ── Status ───────────────────────────────────────────────────────────

    def is_king_in_check(self, color: Color) -> bool:
        return self._generator().is_in_check(color)

    def get_game_state(self) -> GameStatus:
        return Rules.game_status(self._state, self._config.strict_castling)

    # ── Internal ─────────────────────────────────────────────────────────

    def _generator(self) -> MoveGenerator:
        return MoveGenerator(self._state, self._config.strict_castling)

    def _check_game_over(self) -> None:
        status = self.get_game_state()
        if status == GameStatus.ONGOING:
            return
        _LOGGER.info(
            "Game over after %d plies: %s (%s to move)",
            self._state.ply_count,
            status,
            self._state.turn,
        )
        for cb in self.events.on_game_over:
            cb(status)
