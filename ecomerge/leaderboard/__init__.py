# -*- coding: utf-8 -*-
"""
Local high-score table.

It includes the `ScoreEntry` record, the `LeaderboardStore` keeping the top scores sorted and capped,
and the persistence backends the store writes through.
"""

from .backends import JsonFileBackend, LeaderboardBackend, LeaderboardError, MemoryBackend
from .store import LeaderboardStore, ScoreEntry

__all__ = [
    "ScoreEntry",
    "LeaderboardStore",
    "LeaderboardBackend",
    "LeaderboardError",
    "MemoryBackend",
    "JsonFileBackend",
]
