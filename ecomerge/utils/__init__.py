# -*- coding: utf-8 -*-
"""
Presentation helpers: the eco theme, console rendering and the matplotlib window.
"""

from .render import render_text
from .themes import COLORS, TILE_EMOJIS, TILE_NAMES, tile_badge, tile_label

__all__ = ["render_text", "COLORS", "TILE_EMOJIS", "TILE_NAMES", "tile_badge", "tile_label"]
