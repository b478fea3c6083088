"""Word search solving for letter grids."""

from .models import Cell, Grid, PathError, PathValidationResult
from .dictionary import Dictionary, TrieDictionary, Language, load_dictionary, normalize_word
from .grid import DIRECTIONS, in_bounds, is_adjacent, neighbors, word_for_path, build_grid, parse_grid, render_grid
from .finder import MIN_WORD_LENGTH, solve, find_path
from .verify import validate_path

__all__ = [
    # Models
    "Cell",
    "Grid",
    "PathError",
    "PathValidationResult",
    # Dictionary
    "Dictionary",
    "TrieDictionary",
    "Language",
    "load_dictionary",
    "normalize_word",
    # Grid utilities
    "DIRECTIONS",
    "in_bounds",
    "is_adjacent",
    "neighbors",
    "word_for_path",
    "build_grid",
    "parse_grid",
    "render_grid",
    # Solving
    "MIN_WORD_LENGTH",
    "solve",
    "find_path",
    # Verification
    "validate_path",
]
