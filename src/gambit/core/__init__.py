"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from gambit.core import GameState, MoveGenerator

    state = GameState()
    gen = MoveGenerator(state)
    for move in gen.generate_legal_moves():
        print(move)
"""

from gambit.core.board import Board
from gambit.core.enums import CastleSide, CastlingRights, Color, GameStatus, PieceType
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.core.piece import Piece
from gambit.core.rules import Rules
from gambit.core.state import GameState, HistoryEntry, Snapshot
from gambit.core.types import Square, in_bounds, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastleSide",
    "CastlingRights",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameState",
    "HistoryEntry",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "Snapshot",
]
