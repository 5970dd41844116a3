"""
Grid math for the snake simulation.

Coordinates are grid-aligned: every x and y is a non-negative multiple of
the configured cell size. The grid wraps around on both axes.
"""

import math
import random
from typing import Iterator, NamedTuple, Optional


class Cell(NamedTuple):
    """One grid-aligned position. Compared exactly, no tolerance."""

    x: float
    y: float


def cells_along(extent: float, cell_size: float) -> int:
    """Number of whole cells that fit along one axis."""
    ratio = extent / cell_size
    nearest = round(ratio)
    # 0.3 / 0.1 is 2.9999999999999996 in binary floating point
    if math.isclose(ratio, nearest):
        return int(nearest)
    return math.floor(ratio)


def cell_index(coordinate: float, cell_size: float) -> int:
    """Column or row index of a grid-aligned coordinate."""
    return int(round(coordinate / cell_size))


def validate_grid(width: float, height: float, cell_size: float) -> None:
    """
    Check that a grid extent is usable for wrapping and placement.

    Raises:
        ValueError: If the cell size is not positive, an extent holds fewer
            than two cells (random placement skips the last one), or a cell
            does not evenly divide an extent.
    """
    if cell_size <= 0:
        raise ValueError(f"Cell size must be positive, got {cell_size}")

    for name, extent in (("width", width), ("height", height)):
        ratio = extent / cell_size
        if not math.isclose(ratio, round(ratio)):
            raise ValueError(
                f"Cell size {cell_size} does not evenly divide grid {name} {extent}"
            )
        if cells_along(extent, cell_size) < 2:
            raise ValueError(
                f"Grid {name} {extent} must hold at least two cells of size {cell_size}"
            )


def wrap(coordinate: float, extent: float, cell_size: float) -> float:
    """
    Wrap a coordinate that has moved at most one cell past an edge.

    Values inside [0, extent) are returned unchanged; stepping off the far
    edge re-enters at 0 and stepping off the near edge re-enters at the
    last cell.
    """
    if coordinate >= extent:
        return 0
    if coordinate < 0:
        # Same value random_cell() and all_cells() produce for the last cell
        return (cells_along(extent, cell_size) - 1) * cell_size
    return coordinate


def random_cell(
    width: float,
    height: float,
    cell_size: float,
    rng: Optional[random.Random] = None
) -> Cell:
    """
    Pick a uniformly random cell.

    The last column and the last row are never chosen: the sampling range
    is floor(extent / cell_size) - 1 cells on each axis.

    Raises:
        ValueError: If the grid is too small to leave any cell in range.
    """
    rng = rng or random
    cells_wide = cells_along(width, cell_size) - 1
    cells_high = cells_along(height, cell_size) - 1

    if cells_wide <= 0 or cells_high <= 0:
        raise ValueError(
            f"Grid {width}x{height} with cell size {cell_size} is too small "
            f"for random placement"
        )

    x = rng.randrange(cells_wide) * cell_size
    y = rng.randrange(cells_high) * cell_size
    return Cell(x, y)


def all_cells(width: float, height: float, cell_size: float) -> Iterator[Cell]:
    """Yield every cell of the grid, row by row."""
    cells_wide = cells_along(width, cell_size)
    cells_high = cells_along(height, cell_size)
    for row in range(cells_high):
        for col in range(cells_wide):
            yield Cell(col * cell_size, row * cell_size)
