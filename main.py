import argparse
import json
from pathlib import Path
from reachability.reachable import analyze_reachability, count_reachable
from reachability.types import Grid, ReachResult
from reachability.validation import validate_grid_shape, validate_input, validate_steps_type
from typing import Any, Optional


def run(grid: Optional[Grid], steps: int, use_shortcut: bool = True) -> int:
    # boundary validation
    validate_steps_type(steps)
    validate_input(grid, steps)
    grid = validate_grid_shape(grid)

    return count_reachable(grid=grid, steps=steps, use_shortcut=use_shortcut)


def run_detailed(grid: Optional[Grid], steps: int, use_shortcut: bool = True) -> ReachResult:
    validate_steps_type(steps)
    validate_input(grid, steps)
    grid = validate_grid_shape(grid)

    return analyze_reachability(grid=grid, steps=steps, use_shortcut=use_shortcut)


def run_with_trace(grid: Optional[Grid], steps: int, use_shortcut: bool = True) -> tuple[ReachResult, list[str]]:
    validate_steps_type(steps)
    validate_input(grid, steps)
    grid = validate_grid_shape(grid)

    trace_log: list[str] = []
    result = analyze_reachability(
        grid=grid,
        steps=steps,
        use_shortcut=use_shortcut,
        trace=True,
        trace_log=trace_log,
    )
    return result, trace_log


def load_grid_from_file(input_path: str) -> tuple[Grid, int]:
    path = Path(input_path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ValueError(f"input file not found: {input_path}") from exc

    if path.suffix.lower() == ".json":
        return _parse_json_payload(text, input_path)
    return _parse_text_payload(text, input_path)


def _parse_json_payload(text: str, input_path: str) -> tuple[Grid, int]:
    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"input file is not valid JSON: {input_path}") from exc

    if not isinstance(payload, dict):
        raise ValueError("JSON root must be an object")

    grid = payload.get("grid")
    steps = payload.get("steps")
    if grid is None:
        raise ValueError("JSON must include 'grid'")
    if steps is None:
        raise ValueError("JSON must include 'steps'")

    validate_steps_type(steps)
    return validate_grid_shape(grid), steps


def _parse_text_payload(text: str, input_path: str) -> tuple[Grid, int]:
    """Read the whitespace format: a step count line, then one line per row."""
    lines = [line.split() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError(f"input file is empty: {input_path}")

    header, rows = lines[0], lines[1:]
    if len(header) != 1:
        raise ValueError("first line must hold only the step count")

    try:
        steps = int(header[0])
        grid = [[int(token) for token in row] for row in rows]
    except ValueError as exc:
        raise ValueError(f"input file must contain only integers: {input_path}") from exc

    return grid, steps


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count grid cells reachable from positive cells within a step bound")
    parser.add_argument("--input", required=True, help="Path to a JSON file (grid, steps) or a whitespace text grid")
    parser.add_argument("--steps", type=int, default=None, help="Override the step count read from the input file")
    parser.add_argument("--trace", action="store_true", help="Include exploration trace output")
    parser.add_argument("--no-shortcut", action="store_true", help="Always explore, even when the shortcut applies")
    return parser


if __name__ == "__main__":
    args = _build_parser().parse_args()

    try:
        grid, steps = load_grid_from_file(args.input)
        if args.steps is not None:
            steps = args.steps
        use_shortcut = not args.no_shortcut
        if args.trace:
            result, trace_log = run_with_trace(grid=grid, steps=steps, use_shortcut=use_shortcut)
            print(json.dumps({**result, "trace": trace_log}, indent=2))
        else:
            result = run_detailed(grid=grid, steps=steps, use_shortcut=use_shortcut)
            print(json.dumps(result, indent=2))
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}")
