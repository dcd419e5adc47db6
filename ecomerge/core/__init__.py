# -*- coding: utf-8 -*-
"""
Grid engine for EcoMerge Blitz.

It includes the tile value type, the slide-and-merge transition for the four directions, tile
spawning, legal move detection and terminal state detection.
"""

from .gameboard import (
    TILE_SPAWN_PROBS,
    Transition,
    count_tiles,
    fill_cells,
    grid_from_values,
    is_stuck,
    max_tile,
    merge_row,
    new_grid,
    slide_and_merge,
    spawn_tile,
    transition,
)
from .gamemove import has_legal_move, legal_actions_mask, tile_values
from .tile import Direction, Tile

__all__ = [
    "Direction",
    "Tile",
    "Transition",
    "TILE_SPAWN_PROBS",
    "new_grid",
    "grid_from_values",
    "tile_values",
    "count_tiles",
    "max_tile",
    "merge_row",
    "slide_and_merge",
    "transition",
    "spawn_tile",
    "fill_cells",
    "is_stuck",
    "has_legal_move",
    "legal_actions_mask",
]
