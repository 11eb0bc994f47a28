from typing import Optional

from .types import Coordinate, Grid, TraceLog


def neighbors(grid: Grid, r: int, c: int) -> list[Coordinate]:
    """Orthogonal neighbours of (r, c) in up, right, down, left order.

    Up and down consult the target row's own length so ragged grids never
    yield a column past the end of a shorter row.
    """
    cells: list[Coordinate] = []
    if r - 1 >= 0 and c < len(grid[r - 1]):
        cells.append((r - 1, c))
    if c + 1 < len(grid[r]):
        cells.append((r, c + 1))
    if r + 1 < len(grid) and c < len(grid[r + 1]):
        cells.append((r + 1, c))
    if c - 1 >= 0:
        cells.append((r, c - 1))
    return cells


def is_source(value: int) -> bool:
    return value > 0


def source_cells(grid: Grid) -> list[Coordinate]:
    return [(r, c) for r, row in enumerate(grid) for c, value in enumerate(row) if is_source(value)]


def has_source(grid: Grid) -> bool:
    return any(is_source(value) for row in grid for value in row)


def is_rectangular(grid: Grid) -> bool:
    if not grid:
        return True
    first_row_length = len(grid[0])
    return all(len(row) == first_row_length for row in grid[1:])


def trace(enabled: bool, trace_log: Optional[TraceLog], message: str) -> None:
    if not enabled:
        return
    if trace_log is not None:
        trace_log.append(message)
    else:
        print(message)


def indent(depth: int) -> str:
    return "  " * depth
