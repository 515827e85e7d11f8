"""Gambit — a chess rules engine.

``gambit.core`` holds the rules, ``gambit.game`` the engine a front-end
drives a game through.
"""

from gambit.game import ChessEngine, EngineConfig

__all__ = ["ChessEngine", "EngineConfig"]
