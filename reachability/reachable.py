from typing import Optional

from .explorer import explore
from .shortcut import try_shortcut
from .types import Grid, ReachResult, TraceLog
from .utils import source_cells
from .utils import trace as _trace
from .validation import validate_input


def count_reachable(
    grid: Optional[Grid],
    steps: int,
    use_shortcut: bool = True,
    trace: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> int:
    result = analyze_reachability(
        grid=grid,
        steps=steps,
        use_shortcut=use_shortcut,
        trace=trace,
        trace_log=trace_log,
    )
    return int(result["count"])


def analyze_reachability(
    grid: Optional[Grid],
    steps: int,
    use_shortcut: bool = True,
    trace: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> ReachResult:
    validate_input(grid, steps)

    sources = source_cells(grid)
    _trace(
        trace,
        trace_log,
        f"Initialized reachability: rows={len(grid)}, steps={steps}, source_cells={len(sources)}",
    )

    if use_shortcut:
        shortcut_value = try_shortcut(grid, steps)
        if shortcut_value is not None:
            _trace(trace, trace_log, f"Shortcut applies: {shortcut_value} cells reachable")
            return {
                "count": shortcut_value,
                "strategy": "shortcut",
                "source_cells": len(sources),
                "message": "Step bound covers the whole rectangular grid.",
            }

    visited = explore(grid, steps, sources=sources, trace_enabled=trace, trace_log=trace_log)
    _trace(trace, trace_log, f"Exploration complete: {len(visited)} cells reachable")
    return {
        "count": len(visited),
        "strategy": "explore",
        "source_cells": len(sources),
        "message": "Counted cells by bounded exploration from every source cell.",
    }
