"""Console rendering of a session snapshot."""

from ecomerge.core.gamemove import tile_values
from ecomerge.envs.session import Phase, SessionState
from ecomerge.leaderboard.store import ScoreEntry
from ecomerge.utils.themes import tile_badge


def render_text(state: SessionState) -> str:
    """
    Render a snapshot as plain text.

    The first line carries the score and the remaining time, then one line per grid row with empty
    cells shown as dots and themed tiles prefixed with their emoji.
    """
    lines = [f"Score: {state.score}\tTime: {state.time_remaining}s"]
    for row in tile_values(state.grid).tolist():
        lines.append(" \t".join(tile_badge(value) if value else "." for value in row))
    if state.phase is Phase.ENDED:
        lines.append(f"Game Over! Final Score: {state.score}")
    return "\n".join(lines)


def render_leaderboard(entries: list[ScoreEntry]) -> str:
    """Render the top scores as a table."""
    if not entries:
        return "No scores yet. Be the first to play!"

    lines = ["Rank\tName\tScore\tDate"]
    for rank, entry in enumerate(entries, start=1):
        lines.append(f"{rank}\t{entry.name}\t{entry.score}\t{entry.date.date().isoformat()}")
    return "\n".join(lines)
