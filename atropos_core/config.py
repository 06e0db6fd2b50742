from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def debug_enabled() -> bool:
    """True when ATROPOS_DEBUG asks for search tracing on stderr."""
    return _env_flag('ATROPOS_DEBUG')


@dataclass(frozen=True)
class SearchConfig:
    """Tuning constants of the depth-limited search."""
    max_depth: int = 4
    # Above this many uncolored circles a free move is scored, not searched.
    endgame_tactic: int = 6
    # Depth used at the root when a free move must be searched on a wide board.
    wide_search_depth: int = 2
    free_move_score: int = 5
    lose_score: int = -10
    # Worse than any reachable score for either side.
    sentinel: int = 100
    tie_break_probability: float = 0.1

    @classmethod
    def from_env(cls) -> 'SearchConfig':
        """
        Build a config from the environment.
        ATROPOS_MAX_DEPTH and ATROPOS_ENDGAME_TACTIC override the defaults.
        """
        base = cls()
        max_depth = _env_int('ATROPOS_MAX_DEPTH', base.max_depth)
        if max_depth < 1:
            raise ValueError('ATROPOS_MAX_DEPTH must be at least 1')
        return cls(
            max_depth=max_depth,
            endgame_tactic=_env_int('ATROPOS_ENDGAME_TACTIC', base.endgame_tactic),
        )


DEFAULT_CONFIG = SearchConfig()
