"""Engine settings."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any


@dataclass
class EngineConfig:
    """All user-configurable engine settings."""

    # Rules
    # Off: castling only needs the right and empty squares between king and
    # rook. On: the king may not castle out of or through check.
    strict_castling: bool = False

    # Diagnostics
    log_moves: bool = True

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> EngineConfig:
        """Build a config from plain values; unknown keys are ignored."""
        known = {f.name: f for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            if key not in known:
                continue
            if not isinstance(value, bool):
                raise TypeError(f"{key} must be a bool, got {type(value).__name__}")
            kwargs[key] = value
        return cls(**kwargs)
