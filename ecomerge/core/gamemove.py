"""
Legal move detection, computed on tile values with vectorized comparisons instead of trial slides.
"""

from numpy import array, int64, ndarray

from ecomerge.core.tile import Direction


def tile_values(grid: ndarray) -> ndarray:
    """
    Project a grid onto its tile values.

    Parameters
    ----------
    grid : ndarray
        The grid of tiles.

    Returns
    -------
    ndarray
        An ``int64`` array of the same shape, ``0`` standing for an empty cell.
    """
    return array([[0 if tile is None else tile.value for tile in row] for row in grid], dtype=int64)


def _as_values(grid: ndarray) -> ndarray:
    """Accept either a grid of tiles or a matrix of values."""
    return tile_values(grid) if grid.dtype == object else grid


def legal_actions_mask(grid: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    grid : ndarray
        A grid of tiles, or its ``tile_values`` projection.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the grid.

    Notes
    -----
    A move changes the grid iff some tile has an empty neighbour on the side it slides towards, or
    two neighbours along its axis hold the same value.
    """
    values = _as_values(grid)

    # ##>: Horizontal adjacency for left/right.
    left_cols, right_cols = values[:, :-1], values[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Vertical adjacency for up/down.
    top_rows, bottom_rows = values[:-1, :], values[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: Slide conditions per direction.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def has_legal_move(grid: ndarray) -> bool:
    """
    Check if at least one direction would move a tile.

    An empty grid has no legal move.
    """
    return any(legal_actions_mask(grid))
