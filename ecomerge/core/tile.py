"""
Tile value type and the direction enumeration shared by the engine and the session.
"""

from dataclasses import dataclass
from enum import IntEnum
from itertools import count
from typing import Optional, Union

# ##>: Process-wide id source; ids are opaque and never reused.
_IDS = count(1)


def next_tile_id() -> int:
    """Return a fresh tile identifier."""
    return next(_IDS)


def is_tile_value(value: int) -> bool:
    """Check that ``value`` is a power of two greater or equal to 2."""
    return isinstance(value, int) and value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class Tile:
    """
    A single tile of the grid.

    Parameters
    ----------
    value : int
        Power of two, at least 2.
    id : int
        Opaque identifier, distinct for every spawned or merged tile.
    merged_from : tuple[int, int], optional
        Identifiers of the two tiles that produced this one, ``None`` for a spawned tile.
    """

    value: int
    id: int
    merged_from: Optional[tuple[int, int]] = None

    def __post_init__(self):
        if not is_tile_value(self.value):
            raise ValueError(f'tile value must be a power of two >= 2, got {self.value!r}')

    @classmethod
    def spawn(cls, value: int) -> 'Tile':
        """Create a brand new tile."""
        return cls(value=value, id=next_tile_id())

    @classmethod
    def merge(cls, first: 'Tile', second: 'Tile') -> 'Tile':
        """
        Combine two equal tiles into a new one of twice the value.

        Raises
        ------
        ValueError
            If the two tiles do not hold the same value.
        """
        if first.value != second.value:
            raise ValueError(f'cannot merge tiles of value {first.value} and {second.value}')
        return cls(value=first.value * 2, id=next_tile_id(), merged_from=(first.id, second.id))


class Direction(IntEnum):
    """
    Slide directions.

    The integer value is the number of counter-clockwise quarter turns which maps the direction onto
    ``LEFT``, so ``numpy.rot90(grid, k=direction)`` normalizes any move into a left slide.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: Union['Direction', int, str, None]) -> Optional['Direction']:
        """
        Convert user facing input into a direction.

        Accepts a ``Direction``, its integer value, or a case-insensitive name such as ``"left"`` or
        ``"ArrowLeft"``. Anything else gives ``None``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return None
        if isinstance(value, str):
            name = value.strip().lower()
            if name.startswith('arrow'):
                name = name[len('arrow'):]
            return cls.__members__.get(name.upper())
        return None
