"""
Persistence backends for the leaderboard.

A backend only loads and saves a list of plain dictionaries; ordering and capping belong to the store.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Union

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class LeaderboardError(RuntimeError):
    """Raised when stored scores cannot be read back."""


class LeaderboardBackend(ABC):
    """Storage medium of a leaderboard."""

    @abstractmethod
    def load(self) -> list[dict[str, Any]]:
        """Return the stored records, best first."""

    @abstractmethod
    def save(self, records: list[dict[str, Any]]):
        """Replace the stored records."""


class MemoryBackend(LeaderboardBackend):
    """Keep the records in memory, for tests and throwaway sessions."""

    def __init__(self, records: Optional[list[dict[str, Any]]] = None):
        self._records = list(records or [])

    def load(self) -> list[dict[str, Any]]:
        return [dict(record) for record in self._records]

    def save(self, records: list[dict[str, Any]]):
        self._records = [dict(record) for record in records]


class JsonFileBackend(LeaderboardBackend):
    """
    Keep the records in a JSON file.

    Parameters
    ----------
    path : str | Path
        File holding a JSON array of entries. A missing file is an empty leaderboard.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []

        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as error:
            raise LeaderboardError(f"cannot read leaderboard {self.path}: {error}") from error

        if not isinstance(records, list):
            raise LeaderboardError(f"leaderboard {self.path} must hold a JSON array")
        return records

    def save(self, records: list[dict[str, Any]]):
        # ##>: The target only ever holds complete JSON.
        staging = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            staging.write_text(json.dumps(records, indent=2), encoding="utf-8")
            staging.replace(self.path)
        except OSError as error:
            raise LeaderboardError(f"cannot write leaderboard {self.path}: {error}") from error
        _logger.debug("Saved %d leaderboard entries to %s", len(records), self.path)
