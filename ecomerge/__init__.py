# -*- coding: utf-8 -*-
"""
EcoMerge Blitz: a timed, eco-themed 2048 with a local high-score table.
"""
from .config import GameConfiguration
from .core import Direction, Tile, has_legal_move, spawn_tile, transition
from .envs import Phase, SessionController, SessionState

__all__ = [
    "GameConfiguration",
    "Direction",
    "Tile",
    "transition",
    "spawn_tile",
    "has_legal_move",
    "Phase",
    "SessionController",
    "SessionState",
]
