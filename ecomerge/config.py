# -*- coding: utf-8 -*-
"""
Game specific configuration.
"""
from dataclasses import dataclass, field
from pathlib import Path

GRID_SIZE = 4
INITIAL_TIME = 60
MAX_LEADERBOARD_ENTRIES = 10
MAX_NAME_LENGTH = 20


def default_leaderboard_path() -> Path:
    """Location of the high-score file when none is given."""
    return Path.home() / ".ecomerge" / "leaderboard.json"


@dataclass
class GameConfiguration:
    """Data needed to run a session and keep its high scores."""

    size: int = GRID_SIZE
    duration: int = INITIAL_TIME
    max_entries: int = MAX_LEADERBOARD_ENTRIES
    name_length: int = MAX_NAME_LENGTH
    spawn_probs: dict[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})
    leaderboard_path: Path = field(default_factory=default_leaderboard_path)

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f"size must be at least 2, got {self.size}")
        if self.duration < 0:
            raise ValueError(f"duration must be non-negative, got {self.duration}")
        if self.max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {self.max_entries}")
        if not 1 <= self.name_length <= MAX_NAME_LENGTH:
            raise ValueError(f"name_length must be between 1 and {MAX_NAME_LENGTH}, got {self.name_length}")
        if abs(sum(self.spawn_probs.values()) - 1.0) > 1e-9:
            raise ValueError(f"spawn probabilities must sum to 1, got {self.spawn_probs}")
        self.leaderboard_path = Path(self.leaderboard_path)
