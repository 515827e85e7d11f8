"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.enums import GameStatus
from gambit.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from gambit.core.state import GameState


class Rules:
    """Static rule-checker that operates on a :class:`GameState`."""

    # Policy: only checkmate and stalemate end the game. The fifty-move
    # counter is exposed for display but never enforced.

    @staticmethod
    def is_in_check(state: GameState) -> bool:
        return MoveGenerator(state).is_in_check(state.turn)

    @staticmethod
    def is_checkmate(state: GameState, strict_castling: bool = False) -> bool:
        return Rules.game_status(state, strict_castling) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(state: GameState, strict_castling: bool = False) -> bool:
        return Rules.game_status(state, strict_castling) == GameStatus.STALEMATE

    @staticmethod
    def is_fifty_move_rule(state: GameState) -> bool:
        return state.halfmove_clock >= 100  # 100 half-moves = 50 full moves

    @staticmethod
    def game_status(state: GameState, strict_castling: bool = False) -> GameStatus:
        """Ongoing while the side to move has a legal move."""
        gen = MoveGenerator(state, strict_castling)
        if gen.generate_legal_moves():
            return GameStatus.ONGOING
        if gen.is_in_check(state.turn):
            return GameStatus.CHECKMATE
        return GameStatus.STALEMATE
