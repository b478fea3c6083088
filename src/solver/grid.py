"""Grid building, adjacency and rendering utilities."""

import re
from typing import Iterable, List, Optional, Sequence

from .dictionary import Language, normalize_word
from .models import Cell, Grid


# 8 directions: up, down, left, right, and 4 diagonals
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def in_bounds(cell: Cell, size: int) -> bool:
    return 0 <= cell.row < size and 0 <= cell.col < size


def is_adjacent(a: Cell, b: Cell) -> bool:
    """True if `b` is a king-move away from `a` (Chebyshev distance exactly 1)."""
    return max(abs(a.row - b.row), abs(a.col - b.col)) == 1


def neighbors(cell: Cell, size: int) -> List[Cell]:
    """In-bounds neighbours of `cell`, excluding the cell itself."""
    result = []
    for dr, dc in DIRECTIONS:
        candidate = Cell(cell.row + dr, cell.col + dc)
        if in_bounds(candidate, size):
            result.append(candidate)
    return result


def word_for_path(grid: Grid, path: Iterable[Cell]) -> str:
    """Concatenate the letters along `path`."""
    return "".join(grid.letter(cell) for cell in path)


def build_grid(rows: Sequence[Sequence[str]], language: Language = "tr") -> Grid:
    """Build a Grid from nested letter sequences, uppercasing every cell."""
    return Grid(rows=tuple(tuple(normalize_word(letter, language) for letter in row) for row in rows))


def parse_grid(text: str, language: Language = "tr") -> Grid:
    """
    Parse a grid from text.

    Rows are separated by ';' or newlines. Within a row, cells may be
    separated by commas or whitespace; a row without separators is read one
    character per cell. For example "CATE;ORST;DOGS;NEWS" and
    "C,A,T,E;O,R,S,T;D,O,G,S;N,E,W,S" describe the same grid.

    Raises:
        ValueError: If the text is empty or does not describe a square grid
    """
    lines = [line.strip() for line in re.split(r"[;\n]", text) if line.strip()]
    if not lines:
        raise ValueError("Empty grid specification")

    rows = []
    for line in lines:
        if re.search(r"[,\s]", line):
            rows.append([cell for cell in re.split(r"[,\s]+", line) if cell])
        else:
            rows.append(list(line))

    return build_grid(rows, language)


def render_grid(grid: Grid, highlight: Optional[Iterable[Cell]] = None) -> str:
    """Render the grid as text, one row per line; highlighted cells are bracketed."""
    selected = set(highlight or ())
    lines = []
    for r, row in enumerate(grid.rows):
        cells = []
        for c, letter in enumerate(row):
            cells.append(f"[{letter}]" if Cell(r, c) in selected else f" {letter} ")
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)
