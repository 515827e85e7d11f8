"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from gambit.core.move_generator import MoveGenerator
from gambit.core.state import GameState, HistoryEntry
from gambit.core.types import parse_square
from gambit.game.config import EngineConfig
from gambit.game.engine import ChessEngine

PlayFn = Callable[..., list[HistoryEntry]]


@pytest.fixture
def engine() -> ChessEngine:
    return ChessEngine()


@pytest.fixture
def strict_engine() -> ChessEngine:
    return ChessEngine(EngineConfig(strict_castling=True))


@pytest.fixture
def play() -> PlayFn:
    """Play legal moves given as from/to square pairs, e.g. ``"e2e4"``."""

    def _play(state: GameState, *moves: str) -> list[HistoryEntry]:
        entries: list[HistoryEntry] = []
        for text in moves:
            from_sq = parse_square(text[:2])
            to_sq = parse_square(text[2:4])
            promo = text[4:] or None
            candidates = [
                m
                for m in MoveGenerator(state).generate_legal_moves()
                if m.from_sq == from_sq
                and m.to_sq == to_sq
                and (m.promotion.letter if m.promotion else None) == promo
            ]
            assert len(candidates) == 1, f"{text} is not a legal move"
            entries.append(state.apply_move(candidates[0]))
        return entries

    return _play
