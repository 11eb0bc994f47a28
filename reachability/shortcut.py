from typing import Optional

from .types import Grid
from .utils import has_source, is_rectangular


def try_shortcut(grid: Grid, steps: int) -> Optional[int]:
    """Answer without exploring when the step bound covers a rectangular grid.

    The farthest two cells of an R x C rectangle are (R - 1) + (C - 1) moves
    apart, so a 5 x 4 grid is crossed in 7 moves. When ``steps`` exceeds
    ``R + C - 3`` a single positive cell reaches every cell; with no positive
    cell nothing is reachable. Returns None when the shortcut does not apply:
    an empty grid, a bound too small, or a ragged grid.
    """
    if not grid:
        return None

    row_count = len(grid)
    first_row_length = len(grid[0])
    if steps <= row_count + first_row_length - 3:
        return None
    if not is_rectangular(grid):
        return None

    if not has_source(grid):
        return 0
    return row_count * first_row_length
