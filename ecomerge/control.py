# -*- coding: utf-8 -*-
"""
Play EcoMerge Blitz in a Matplotlib window.

Arrow keys slide the tiles, backspace starts a new game and escape quits. A one second timer drives the
countdown.
"""
import logging
from argparse import ArgumentParser
from dataclasses import replace
from pathlib import Path
from typing import Any, Optional, Sequence

from ecomerge.config import GameConfiguration
from ecomerge.core.tile import Direction
from ecomerge.envs.session import Phase, SessionController, SessionState
from ecomerge.leaderboard import JsonFileBackend, LeaderboardStore
from ecomerge.utils.render import render_leaderboard
from ecomerge.utils.windows import WindowBoard

_logger = logging.getLogger(__name__)

# ##: Matplotlib key names of the four directions.
KEY_DIRECTIONS = {
    "left": Direction.LEFT,
    "up": Direction.UP,
    "right": Direction.RIGHT,
    "down": Direction.DOWN,
}

TICK_INTERVAL = 1000


def new_game(session: SessionController):
    """
    Discard the current session and start a new one.

    Parameters
    ----------
    session: SessionController
        The game session
    """
    session.reset()
    session.start()
    if session.leaderboard is not None:
        print(render_leaderboard(session.leaderboard.query()))


def key_handler(session: SessionController, window: Any, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    session: SessionController
        The game session

    window: WindowBoard
        Class to draw the grid

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        new_game(session)
        return None

    if event.key in KEY_DIRECTIONS:
        session.apply_direction(KEY_DIRECTIONS[event.key])
        return None

    _logger.debug("Unmapped key %s", event.key)
    return None


def game_over_handler(session: SessionController):
    """
    Build a listener printing the final score and the leaderboard once per session.

    Parameters
    ----------
    session: SessionController
        The game session
    """
    reported = {"done": False}

    def _listener(state: SessionState):
        if state.phase is not Phase.ENDED:
            reported["done"] = False
            return
        if reported["done"]:
            return

        reported["done"] = True
        print(f"Game Over! Final Score: {state.score}")
        if session.leaderboard is not None:
            print(render_leaderboard(session.leaderboard.query()))

    return _listener


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(description="EcoMerge Blitz: merge eco tiles against the clock.")
    parser.add_argument("--name", type=str, default="Player", help="name written to the leaderboard")
    parser.add_argument("--duration", type=int, default=None, help="session length in seconds")
    parser.add_argument("--leaderboard", type=Path, default=None, help="high-score JSON file")
    parser.add_argument("--seed", type=int, default=None, help="seed of the tile spawner")
    parser.add_argument("--verbose", action="store_true", help="log every move")
    return parser


def build_configuration(args: Any) -> GameConfiguration:
    """Merge command line flags into the default configuration."""
    overrides = {"duration": args.duration, "leaderboard_path": args.leaderboard}
    return replace(GameConfiguration(), **{key: value for key, value in overrides.items() if value is not None})


def main(argv: Optional[Sequence[str]] = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = build_configuration(args)
    store = LeaderboardStore(JsonFileBackend(config.leaderboard_path), max_entries=config.max_entries)
    session = SessionController(config=config, leaderboard=store, player_name=args.name, seed=args.seed)

    window = WindowBoard(title="EcoMerge Blitz", size=config.size)
    session.subscribe(window.show_state)
    session.subscribe(game_over_handler(session))
    window.register_key_handler(lambda event: key_handler(session, window, event))

    timer = window.add_timer(TICK_INTERVAL, session.tick)
    new_game(session)
    timer.start()

    # Blocking event loop
    window.show(block=True)


if __name__ == "__main__":
    main()
