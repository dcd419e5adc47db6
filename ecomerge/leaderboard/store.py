"""Sorted, capped high-score table."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ecomerge.config import MAX_LEADERBOARD_ENTRIES, MAX_NAME_LENGTH
from ecomerge.leaderboard.backends import LeaderboardBackend, LeaderboardError

# ##>: Module logger.
_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreEntry:
    """
    One line of the leaderboard.

    Parameters
    ----------
    name : str
        Player name, 1 to 20 characters.
    score : int
        Final score of the session.
    date : datetime
        When the session ended.
    """

    name: str
    score: int
    date: datetime

    def __post_init__(self):
        if not self.name:
            raise ValueError("name must not be empty")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(f"name must be at most {MAX_NAME_LENGTH} characters, got {len(self.name)}")
        if self.score < 0:
            raise ValueError(f"score must be non-negative, got {self.score}")

    @classmethod
    def create(cls, name: str, score: int, date: datetime, max_length: int = MAX_NAME_LENGTH) -> "ScoreEntry":
        """Build an entry from raw input: the name is stripped and cut to ``max_length``."""
        return cls(name=name.strip()[:max_length], score=int(score), date=date)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "score": self.score, "date": self.date.isoformat()}

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> "ScoreEntry":
        try:
            return cls(name=record["name"], score=int(record["score"]), date=datetime.fromisoformat(record["date"]))
        except (KeyError, TypeError, ValueError) as error:
            raise LeaderboardError(f"invalid leaderboard entry {record!r}: {error}") from error


class LeaderboardStore:
    """
    Top scores, best first.

    Parameters
    ----------
    backend : LeaderboardBackend
        Where the table is persisted.
    max_entries : int, optional
        How many entries are kept (default is 10).

    Notes
    -----
    - Entries are sorted by descending score; equal scores keep their insertion order.
    - A new entry only pushes out the last one if it scores strictly more.
    """

    def __init__(self, backend: LeaderboardBackend, max_entries: int = MAX_LEADERBOARD_ENTRIES):
        self.backend = backend
        self.max_entries = max_entries

    def query(self) -> list[ScoreEntry]:
        """Return the table, best first."""
        return [ScoreEntry.from_dict(record) for record in self.backend.load()]

    def submit(self, entry: ScoreEntry) -> list[ScoreEntry]:
        """
        Record a score.

        Parameters
        ----------
        entry : ScoreEntry
            The score to add. Submitting an entry already in the table changes nothing.

        Returns
        -------
        list[ScoreEntry]
            The updated table.
        """
        entries = self.query()
        if entry in entries:
            _logger.debug("Entry %s already recorded", entry)
            return entries

        entries.append(entry)
        entries = sorted(entries, key=lambda item: item.score, reverse=True)[: self.max_entries]
        self.backend.save([item.to_dict() for item in entries])

        if entry in entries:
            _logger.info("Recorded %s with %d points at rank %d", entry.name, entry.score, entries.index(entry) + 1)
        else:
            _logger.info("Score %d of %s did not make the leaderboard", entry.score, entry.name)
        return entries

    def rank(self, score: int) -> Optional[int]:
        """
        Position a new score would take.

        Returns
        -------
        int, optional
            1-based rank, or None if the score would not make the table.
        """
        scores = [entry.score for entry in self.query()]
        position = sum(1 for value in scores if value >= score) + 1
        return position if position <= self.max_entries else None
