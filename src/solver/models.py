"""Data models for grids, cells and path validation."""

from typing import List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Cell(NamedTuple):
    """A 0-indexed grid coordinate."""
    row: int
    col: int


class Grid(BaseModel):
    """
    An N×N letter grid, immutable once built.

    Each cell holds exactly one uppercase character.
    """
    model_config = ConfigDict(frozen=True)

    rows: Tuple[Tuple[str, ...], ...]

    @field_validator("rows")
    @classmethod
    def check_square(cls, rows: Tuple[Tuple[str, ...], ...]) -> Tuple[Tuple[str, ...], ...]:
        if not rows:
            raise ValueError("Grid must have at least one row")
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Grid must be square: row {r} has {len(row)} cells, expected {size}")
            for c, letter in enumerate(row):
                if len(letter) != 1:
                    raise ValueError(f"Cell ({r}, {c}) must hold exactly one character, got '{letter}'")
                if letter != letter.upper():
                    raise ValueError(f"Cell ({r}, {c}) must be uppercase, got '{letter}'")
        return rows

    @property
    def size(self) -> int:
        return len(self.rows)

    def letter(self, cell: Cell) -> str:
        return self.rows[cell.row][cell.col]

    def cells(self) -> List[Cell]:
        """All coordinates in row-major order."""
        return [Cell(r, c) for r in range(self.size) for c in range(self.size)]

    def to_lists(self) -> List[List[str]]:
        return [list(row) for row in self.rows]


class PathError(BaseModel):
    """A single path validation error."""
    code: str
    message: str
    index: Optional[int] = None  # Position in the path where the problem was found


class PathValidationResult(BaseModel):
    """Result of checking a path against a grid."""
    valid: bool
    errors: List[PathError] = Field(default_factory=list)
    word: str = ""
    path: List[Cell] = Field(default_factory=list)
