"""
Path verification for word grids.

Validates:
1. Every cell lies inside the grid
2. No cell is used twice
3. Consecutive cells are king-move adjacent
"""

from typing import List, Sequence

from .grid import in_bounds, is_adjacent, word_for_path
from .models import Cell, Grid, PathError, PathValidationResult


def validate_path(grid: Grid, path: Sequence[Cell]) -> PathValidationResult:
    """Check that `path` is a legal selection on `grid` and collect every violation."""
    errors: List[PathError] = []
    cells = [Cell(*cell) for cell in path]

    if not cells:
        errors.append(PathError(
            code="EMPTY_PATH",
            message="Path has no cells",
        ))
        return PathValidationResult(valid=False, errors=errors)

    seen = set()
    for i, cell in enumerate(cells):
        if not in_bounds(cell, grid.size):
            errors.append(PathError(
                code="OUT_OF_BOUNDS",
                message=f"Cell {tuple(cell)} is outside the {grid.size}x{grid.size} grid",
                index=i,
            ))
            continue

        if cell in seen:
            errors.append(PathError(
                code="REPEATED_CELL",
                message=f"Cell {tuple(cell)} is used more than once",
                index=i,
            ))
        seen.add(cell)

        if i > 0 and not is_adjacent(cells[i - 1], cell):
            errors.append(PathError(
                code="NOT_ADJACENT",
                message=f"Cell {tuple(cell)} does not touch previous cell {tuple(cells[i - 1])}",
                index=i,
            ))

    valid = not errors
    return PathValidationResult(
        valid=valid,
        errors=errors,
        word=word_for_path(grid, cells) if valid else "",
        path=cells,
    )
