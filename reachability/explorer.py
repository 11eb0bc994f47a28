from collections import deque
from typing import Optional

from .types import Coordinate, Grid, TraceLog, VisitedSet
from .utils import indent, neighbors, source_cells, trace


def explore(
    grid: Grid,
    steps: int,
    sources: Optional[list[Coordinate]] = None,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> VisitedSet:
    """Collect every cell within ``steps`` orthogonal moves of a source cell.

    All sources share one visited set and one work-list. The work-list is a
    FIFO seeded with every source at the full budget, so entries leave it in
    order of non-increasing remaining moves and the first arrival at a cell
    carries the largest budget any path can bring there. A cell already in
    the visited set is therefore never expanded twice.
    """
    if sources is None:
        sources = source_cells(grid)

    visited: VisitedSet = set()
    pending: deque[tuple[Coordinate, int]] = deque()

    for r, c in sources:
        if (r, c) in visited:
            continue
        trace(trace_enabled, trace_log, f"Source cell ({r}, {c}) value {grid[r][c]}")
        visited.add((r, c))
        pending.append(((r, c), steps))

    while pending:
        (r, c), remaining = pending.popleft()
        if remaining == 0:
            continue

        depth = steps - remaining
        trace(trace_enabled, trace_log, f"{indent(depth)}Expand ({r}, {c}) with {remaining} moves remaining")
        for cell in neighbors(grid, r, c):
            if cell in visited:
                continue
            visited.add(cell)
            pending.append((cell, remaining - 1))

    return visited
