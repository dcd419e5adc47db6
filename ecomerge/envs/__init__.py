# -*- coding: utf-8 -*-
"""
Timed game session driving the grid engine.

This module provides the `SessionController` class, which owns the grid, the score and the countdown of
one game and hands the final score to the leaderboard.
"""

from .session import Phase, SessionController, SessionState

__all__ = ["Phase", "SessionController", "SessionState"]
