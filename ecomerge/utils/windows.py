# -*- coding: utf-8 -*-
"""
Graphical window for EcoMerge Blitz.

It draws the grid, the score and the countdown with Matplotlib and forwards key presses and timer
events to the callbacks it is given.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event, TimerBase

from ecomerge.core.gamemove import tile_values
from ecomerge.envs.session import Phase, SessionState
from ecomerge.utils.themes import text_color, tile_color, tile_label


class WindowBoard:
    """
    Render a session snapshot in a Matplotlib figure, one subplot per cell.

    Notes
    -----
    - The figure title shows the score and the remaining time.
    - The window can be updated in real-time as the game progresses.
    """

    def __init__(self, title: str, size: int):
        """
        Initialize the window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the grid (e.g., 4 for a 4x4 grid).
        """
        self.size = size
        self.fig = plt.figure(figsize=(6, 6.6))
        self.fig.canvas.manager.set_window_title(title)
        self.fig.patch.set_facecolor("#BBADA0")
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """Create one subplot and one text artist per cell."""
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.9, wspace=0.05, hspace=0.05)
        self.header = self.fig.suptitle("", color="white", fontsize="x-large", fontweight="bold")

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="medium", fontweight="demibold", wrap=True)
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def show_state(self, state: SessionState):
        """
        Show or update the grid and the header.

        Parameters
        ----------
        state : SessionState
            Snapshot of the session to display.
        """
        header = f"Score: {state.score}    Time: {state.time_remaining}s"
        if state.phase is Phase.ENDED:
            header = f"Game Over! Final Score: {state.score}"
        elif state.phase is Phase.NOT_STARTED:
            header = "Press backspace to start"
        self.header.set_text(header)

        for ax, text, value in zip(self.axes, self.texts, tile_values(state.grid).flat):
            value = int(value)
            text.set_text(f"{value}\n{tile_label(value)}" if value else "")
            text.set_color(text_color(value))
            ax.set_facecolor(tile_color(value))

        self.fig.canvas.draw_idle()

    def register_key_handler(self, key_handler: Callable):
        """Call ``key_handler`` with every key press event of the window."""
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def add_timer(self, interval: int, callback: Callable[[], None]) -> TimerBase:
        """
        Create a timer on the window event loop.

        Parameters
        ----------
        interval : int
            Period in milliseconds.
        callback : Callable
            Function called at each period.

        Returns
        -------
        TimerBase
            The timer, not started yet.
        """
        timer = self.fig.canvas.new_timer(interval=interval)
        timer.add_callback(callback)
        return timer

    @classmethod
    def show(cls, block: bool = True):
        """Show the window and start the Matplotlib event loop."""
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
