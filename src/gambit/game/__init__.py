"""Game layer — the engine facade a front-end talks to.

Quick start::

    from gambit.core.types import E2, E4
    from gambit.game import ChessEngine

    engine = ChessEngine()
    engine.make_move_if_legal(E2, E4)
    print(engine.get_game_state())
"""

from gambit.game.config import EngineConfig
from gambit.game.engine import ChessEngine, EngineEvents

__all__ = [
    "ChessEngine",
    "EngineConfig",
    "EngineEvents",
]
