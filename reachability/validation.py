from typing import Any, Optional

from .errors import InvalidArgumentError, NullInputError
from .rules import MIN_STEPS
from .types import Grid


def validate_input(grid: Optional[Grid], steps: int) -> None:
    if steps < MIN_STEPS:
        raise InvalidArgumentError(f"steps must be non-negative: steps={steps}")
    if grid is None:
        raise NullInputError("grid must be supplied")


def validate_steps_type(steps: Any) -> None:
    # bool is an int subclass but never a meaningful step count
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise ValueError("steps must be an integer")


def validate_grid_shape(grid: Any) -> Grid:
    """Check that a grid handed in from outside is a list of integer lists.

    Rows may differ in length. Returns the grid unchanged so callers can
    validate and bind in one expression.
    """
    if grid is None:
        raise NullInputError("grid must be supplied")
    if not isinstance(grid, list):
        raise ValueError("grid must be a list of rows")

    for row_index, row in enumerate(grid):
        if not isinstance(row, list):
            raise ValueError(f"grid row {row_index} must be a list of integers")
        for value in row:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"grid row {row_index} entries must be integers")

    return grid
