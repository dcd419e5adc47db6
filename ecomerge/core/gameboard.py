"""
Grid transition engine: sliding, merging, spawning and terminal detection.

A grid is a square ``ndarray`` of ``dtype=object`` whose cells hold a :class:`Tile` or ``None``. Every
direction is handled by the same left slide after rotating the grid with ``numpy.rot90``.
"""

from typing import NamedTuple, Optional, Sequence, Union

from numpy import argwhere, array, array_equal, full, int64, ndarray, rot90
from numpy.random import PCG64DXSM, Generator, default_rng

from ecomerge.core.gamemove import has_legal_move, tile_values
from ecomerge.core.tile import Direction, Tile

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Module-level generator, used when no seed or generator is supplied.
_GENERATOR = default_rng(PCG64DXSM())


class Transition(NamedTuple):
    """Outcome of one slide: the new grid, the points earned and whether anything changed."""

    grid: ndarray
    score_delta: int
    moved: bool


def new_grid(size: int = 4) -> ndarray:
    """
    Create an empty grid.

    Parameters
    ----------
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    ndarray
        A ``size x size`` object array filled with ``None``.
    """
    if size < 1:
        raise ValueError(f'grid size must be positive, got {size}')
    return full((size, size), None, dtype=object)


def grid_from_values(values: Union[ndarray, Sequence[Sequence[int]]]) -> ndarray:
    """
    Build a grid of fresh tiles from a matrix of values, ``0`` meaning empty.

    Mostly handy to set up a known position.
    """
    values = array(values, dtype=int64)
    if values.ndim != 2 or values.shape[0] != values.shape[1]:
        raise ValueError(f'grid must be square, got shape {values.shape}')

    grid = new_grid(values.shape[0])
    for (i, j), value in zip(argwhere(values != 0), values[values != 0]):
        grid[i, j] = Tile.spawn(int(value))
    return grid


def count_tiles(grid: ndarray) -> int:
    """Number of non-empty cells."""
    return sum(tile is not None for tile in grid.flat)


def max_tile(grid: ndarray) -> int:
    """Largest tile value on the grid, 0 if the grid is empty."""
    return int(tile_values(grid).max(initial=0))


def merge_row(row: Sequence[Optional[Tile]]) -> tuple[int, list[Tile]]:
    """
    Slide one row to the left and merge adjacent equal tiles.

    Parameters
    ----------
    row : Sequence[Optional[Tile]]
        One row of the grid, read left to right.

    Returns
    -------
    score : int
        The points earned by the merges of this row.
    merged_row : list[Tile]
        The compacted row, without trailing empty cells.

    Notes
    -----
    - Empty cells are removed before merging.
    - Merging goes from the start of the row towards the end.
    - A tile produced by a merge is never merged again in the same call.
    """
    # ##: Gravity compaction.
    tiles = [tile for tile in row if tile is not None]
    if len(tiles) <= 1:
        return 0, tiles

    result = []
    score = 0

    # ##: Single pass, skipping past every merge.
    i = 0
    while i < len(tiles) - 1:
        if tiles[i].value == tiles[i + 1].value:
            merged = Tile.merge(tiles[i], tiles[i + 1])
            result.append(merged)
            score += merged.value
            i += 2
        else:
            result.append(tiles[i])
            i += 1

    if i == len(tiles) - 1:
        result.append(tiles[-1])

    return score, result


def slide_and_merge(grid: ndarray) -> tuple[int, ndarray]:
    """
    Slide every row of the grid to the left and merge.

    Parameters
    ----------
    grid : ndarray
        The grid, already rotated so that the move is a left slide.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_grid : ndarray
        A new grid, empty cells padded on the right of each row.
    """
    result = new_grid(grid.shape[0])
    score = 0

    for i, row in enumerate(grid):
        score_row, merged_row = merge_row(row)
        score += score_row
        for j, tile in enumerate(merged_row):
            result[i, j] = tile

    return score, result


def transition(grid: ndarray, direction: Union[Direction, int, str]) -> Transition:
    """
    Compute the grid after sliding in ``direction``, without spawning a tile.

    Parameters
    ----------
    grid : ndarray
        The current grid. It is never modified.
    direction : Direction | int | str
        Where to slide the tiles.

    Returns
    -------
    Transition
        The new grid, the score delta and whether any cell changed value.

    Raises
    ------
    ValueError
        If ``direction`` is not one of the four directions.
    """
    action = Direction.parse(direction)
    if action is None:
        raise ValueError(f'unknown direction: {direction!r}')

    score, updated = slide_and_merge(rot90(grid, k=int(action)))
    result = rot90(updated, k=-int(action)).copy()

    # ##>: Compare values only, tile ids always differ after a merge.
    moved = not array_equal(tile_values(grid), tile_values(result))
    return Transition(grid=result, score_delta=score, moved=moved)


def _generator(seed: Optional[int], rng: Optional[Generator]) -> Generator:
    if rng is not None:
        return rng
    return default_rng(seed) if seed is not None else _GENERATOR


def spawn_tile(
    grid: ndarray,
    seed: Optional[int] = None,
    rng: Optional[Generator] = None,
    probs: Optional[dict[int, float]] = None,
) -> ndarray:
    """
    Place a new tile in a random empty cell.

    Parameters
    ----------
    grid : ndarray
        The current grid. It is never modified.
    seed : int, optional
        Random number generator seed for reproducibility.
    rng : Generator, optional
        Generator to draw from, takes precedence over ``seed``.
    probs : dict[int, float], optional
        Probability of each spawned value (default is 2 with 0.9 and 4 with 0.1).

    Returns
    -------
    ndarray
        A copy of the grid with one more tile, or ``grid`` itself when it is full.

    Notes
    -----
    The empty cell is chosen uniformly. A full grid is not an error: it is what terminal detection
    looks for.
    """
    available_cells = argwhere(tile_values(grid) == 0)
    if len(available_cells) == 0:
        return grid

    probs = probs or TILE_SPAWN_PROBS
    generator = _generator(seed, rng)

    row, col = available_cells[generator.integers(len(available_cells))]
    value = int(generator.choice(list(probs), p=list(probs.values())))

    result = grid.copy()
    result[row, col] = Tile.spawn(value)
    return result


def fill_cells(
    grid: ndarray,
    number_tile: int,
    seed: Optional[int] = None,
    rng: Optional[Generator] = None,
    probs: Optional[dict[int, float]] = None,
) -> ndarray:
    """
    Spawn up to ``number_tile`` tiles, stopping early if the grid fills up.

    Returns
    -------
    ndarray
        A new grid with the added tiles.
    """
    generator = _generator(seed, rng)
    for _ in range(number_tile):
        grid = spawn_tile(grid, rng=generator, probs=probs)
    return grid


def is_stuck(grid: ndarray) -> bool:
    """
    Check if the game is over.

    Returns
    -------
    bool
        True when the grid has no empty cell and no direction would change it.
    """
    values = tile_values(grid)
    return bool((values != 0).all()) and not has_legal_move(values)
