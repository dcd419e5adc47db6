"""Timed EcoMerge session: phase machine around the grid engine."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional, Union

from numpy import ndarray
from numpy.random import default_rng

from ecomerge.config import GameConfiguration
from ecomerge.core.gameboard import fill_cells, is_stuck, max_tile, new_grid, spawn_tile, transition
from ecomerge.core.tile import Direction
from ecomerge.leaderboard.backends import LeaderboardError
from ecomerge.leaderboard.store import LeaderboardStore, ScoreEntry

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Phase(Enum):
    """Lifecycle stage of a session."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


@dataclass(frozen=True)
class SessionState:
    """Read-only snapshot handed to renderers."""

    grid: ndarray
    score: int
    time_remaining: int
    phase: Phase


class SessionController:
    """
    One timed game.

    The controller is the only writer of the session state. Direction events and timer ticks are
    expected to come from the same event loop, one at a time.

    Parameters
    ----------
    config : GameConfiguration, optional
        Grid size, duration and spawn probabilities (defaults are a 4x4 grid and 60 seconds).
    leaderboard : LeaderboardStore, optional
        Where the final score goes. Without one, scores are not recorded.
    player_name : str, optional
        Name written to the leaderboard.
    seed : int, optional
        Seed of the tile spawning generator.
    """

    def __init__(
        self,
        config: Optional[GameConfiguration] = None,
        leaderboard: Optional[LeaderboardStore] = None,
        player_name: str = "Player",
        seed: Optional[int] = None,
    ):
        if not player_name or not player_name.strip():
            raise ValueError("player name must not be empty")

        self.config = config or GameConfiguration()
        self.leaderboard = leaderboard
        self.player_name = player_name
        self._rng = default_rng(seed)
        self._listeners: list[Callable[[SessionState], None]] = []
        self._init_state()

    def _init_state(self):
        self._grid = new_grid(self.config.size)
        self._score = 0
        self._time_remaining = self.config.duration
        self._phase = Phase.NOT_STARTED

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def score(self) -> int:
        return self._score

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def grid(self) -> ndarray:
        """Copy of the current grid."""
        return self._grid.copy()

    @property
    def is_running(self) -> bool:
        return self._phase is Phase.RUNNING

    @property
    def is_finished(self) -> bool:
        return self._phase is Phase.ENDED

    @property
    def state(self) -> SessionState:
        """Snapshot of the session for display."""
        return SessionState(
            grid=self._grid.copy(), score=self._score, time_remaining=self._time_remaining, phase=self._phase
        )

    def subscribe(self, callback: Callable[[SessionState], None]):
        """Register a callback receiving a snapshot after every change."""
        self._listeners.append(callback)

    def _notify(self):
        snapshot = self.state
        for callback in self._listeners:
            callback(snapshot)

    def start(self, grid: Optional[ndarray] = None, time_left: Optional[int] = None):
        """
        Start the session.

        Parameters
        ----------
        grid : ndarray, optional
            Opening grid. By default an empty grid with two spawned tiles.
        time_left : int, optional
            Countdown in seconds (default is the configured duration).

        Notes
        -----
        Only a session which has not started yet can be started; otherwise nothing happens.
        """
        if self._phase is not Phase.NOT_STARTED:
            _logger.warning("Ignoring start: session is %s", self._phase.value)
            return

        if grid is None:
            grid = fill_cells(new_grid(self.config.size), number_tile=2, rng=self._rng, probs=self.config.spawn_probs)
        elif grid.shape != (self.config.size, self.config.size):
            raise ValueError(f"grid must be {self.config.size}x{self.config.size}, got {grid.shape}")

        self._grid = grid.copy()
        self._score = 0
        self._time_remaining = self.config.duration if time_left is None else max(int(time_left), 0)
        self._phase = Phase.RUNNING
        _logger.info("Session started for %s with %d seconds", self.player_name, self._time_remaining)

        if self._time_remaining == 0 or is_stuck(self._grid):
            self._finish()
        self._notify()

    def apply_direction(self, direction: Union[Direction, int, str]) -> bool:
        """
        Slide the tiles.

        Parameters
        ----------
        direction : Direction | int | str
            Where to slide. Unrecognized values are ignored.

        Returns
        -------
        bool
            True if the grid changed, in which case a tile was spawned and the score updated.
        """
        if self._phase is not Phase.RUNNING:
            return False

        action = Direction.parse(direction)
        if action is None:
            _logger.warning("Ignoring unknown direction %r", direction)
            return False

        result = transition(self._grid, action)
        if not result.moved:
            _logger.debug("Move %s changed nothing", action.name.lower())
            return False

        self._grid = spawn_tile(result.grid, rng=self._rng, probs=self.config.spawn_probs)
        self._score += result.score_delta
        _logger.debug("Move %s scored %d (total %d)", action.name.lower(), result.score_delta, self._score)

        if is_stuck(self._grid):
            self._finish()
        self._notify()
        return True

    def tick(self):
        """Count one second down, ending the session at zero."""
        if self._phase is not Phase.RUNNING:
            return

        self._time_remaining = max(self._time_remaining - 1, 0)
        if self._time_remaining == 0:
            self._finish()
        self._notify()

    def reset(self):
        """Throw the current session away and get ready for a new one."""
        self._init_state()
        _logger.debug("Session reset")
        self._notify()

    def _finish(self):
        if self._phase is not Phase.RUNNING:
            return

        self._phase = Phase.ENDED
        _logger.info(
            "Session ended for %s: score %d, best tile %d, %d seconds left",
            self.player_name,
            self._score,
            max_tile(self._grid),
            self._time_remaining,
        )

        if self.leaderboard is not None and self._score > 0:
            entry = ScoreEntry.create(
                name=self.player_name,
                score=self._score,
                date=datetime.now(tz=timezone.utc),
                max_length=self.config.name_length,
            )
            try:
                self.leaderboard.submit(entry)
            except LeaderboardError:
                _logger.exception("Could not record the score of %s", self.player_name)
