"""
Tests for the presentation layer: key handling, console rendering and the Matplotlib window.
"""

from types import SimpleNamespace
from unittest import TestCase, main
from unittest.mock import patch

import matplotlib

matplotlib.use("Agg")

from ecomerge.config import GameConfiguration  # noqa: E402
from ecomerge.control import build_configuration, build_parser, game_over_handler, key_handler  # noqa: E402
from ecomerge.core.gameboard import grid_from_values  # noqa: E402
from ecomerge.core.tile import Direction  # noqa: E402
from ecomerge.envs.session import Phase, SessionController  # noqa: E402
from ecomerge.leaderboard import LeaderboardStore, MemoryBackend  # noqa: E402
from ecomerge.utils.render import render_leaderboard, render_text  # noqa: E402
from ecomerge.utils.themes import tile_badge, tile_label  # noqa: E402
from ecomerge.utils.windows import WindowBoard  # noqa: E402

OPENING = [[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]


class FakeWindow:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class TestKeyHandler(TestCase):
    """Keyboard events reaching the session."""

    def setUp(self):
        self.session = SessionController(leaderboard=LeaderboardStore(MemoryBackend()), player_name="Ada", seed=1)
        self.window = FakeWindow()

    def test_arrow_moves(self):
        """Arrow keys slide the tiles."""
        self.session.start(grid=grid_from_values(OPENING))
        key_handler(self.session, self.window, SimpleNamespace(key="left"))
        self.assertEqual(self.session.score, 4)

    def test_other_keys_ignored(self):
        """Unmapped keys change nothing."""
        self.session.start(grid=grid_from_values(OPENING))
        key_handler(self.session, self.window, SimpleNamespace(key="q"))
        self.assertEqual(self.session.score, 0)
        self.assertFalse(self.window.closed)

    def test_escape_closes(self):
        key_handler(self.session, self.window, SimpleNamespace(key="escape"))
        self.assertTrue(self.window.closed)

    def test_backspace_restarts(self):
        """Backspace throws the game away and starts a new one."""
        self.session.start(grid=grid_from_values(OPENING))
        self.session.apply_direction(Direction.LEFT)
        key_handler(self.session, self.window, SimpleNamespace(key="backspace"))
        self.assertEqual(self.session.phase, Phase.RUNNING)
        self.assertEqual(self.session.score, 0)

    def test_game_over_reported_once(self):
        """The final score is printed once per session."""
        self.session.subscribe(game_over_handler(self.session))
        with patch("builtins.print") as printer:
            self.session.start(time_left=1)
            self.session.tick()
            self.session.tick()

        lines = [call.args[0] for call in printer.call_args_list]
        self.assertEqual([line for line in lines if line.startswith("Game Over")], ["Game Over! Final Score: 0"])
        self.assertIn("No scores yet. Be the first to play!", lines)


class TestCommandLine(TestCase):
    def test_overrides(self):
        """Flags override the defaults."""
        args = build_parser().parse_args(["--duration", "30", "--leaderboard", "scores.json", "--name", "Ada"])
        config = build_configuration(args)
        self.assertEqual(config.duration, 30)
        self.assertEqual(config.leaderboard_path.name, "scores.json")
        self.assertEqual(config.size, 4)

    def test_invalid_duration(self):
        args = build_parser().parse_args(["--duration", "-5"])
        with self.assertRaises(ValueError):
            build_configuration(args)


class TestRendering(TestCase):
    """Text and window output."""

    def setUp(self):
        self.session = SessionController(config=GameConfiguration(duration=5), player_name="Ada", seed=2)
        self.session.start(grid=grid_from_values(OPENING))

    def test_render_text(self):
        text = render_text(self.session.state)
        lines = text.splitlines()
        self.assertEqual(lines[0], "Score: 0\tTime: 5s")
        self.assertEqual(lines[1], "\U0001F33F2 \t\U0001F33F2 \t. \t.")
        self.assertEqual(len(lines), 5)

    def test_render_leaderboard(self):
        self.assertIn("No scores yet", render_leaderboard([]))

    def test_labels(self):
        self.assertEqual(tile_label(2), "Compost Bin")
        self.assertEqual(tile_label(2048), "Eco Tile 2048")

    def test_badges(self):
        """Themed tiles carry their emoji, larger ones only their value."""
        self.assertEqual(tile_badge(1024), "\U0001F6F81024")
        self.assertEqual(tile_badge(2048), "2048")

    def test_window(self):
        """The window shows the values and the countdown."""
        window = WindowBoard(title="EcoMerge Blitz", size=4)
        window.show_state(self.session.state)
        self.assertEqual(window.header.get_text(), "Score: 0    Time: 5s")
        self.assertEqual(window.texts[0].get_text(), "2\nCompost Bin")
        self.assertEqual(window.texts[2].get_text(), "")

        timer = window.add_timer(1000, self.session.tick)
        self.assertEqual(timer.interval, 1000)
        window.close()
        self.assertTrue(window.closed)


if __name__ == "__main__":
    main()
