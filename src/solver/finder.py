"""
Exhaustive word search over a letter grid.

Every dictionary word of at least MIN_WORD_LENGTH letters that can be spelled
by a path of king-move-adjacent, non-repeating cells is reported.
"""

import logging
from typing import List, Optional, Set

from .dictionary import Dictionary
from .grid import neighbors
from .models import Cell, Grid

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3


def solve(grid: Grid, dictionary: Dictionary) -> Set[str]:
    """Find all valid words on the grid using DFS with prefix pruning."""
    size = grid.size
    found: Set[str] = set()
    visited = [[False] * size for _ in range(size)]

    def dfs(cell: Cell, prefix: str) -> None:
        next_prefix = prefix + grid.letter(cell)

        # No dictionary word continues this way
        if not dictionary.has_prefix(next_prefix):
            return

        if len(next_prefix) >= MIN_WORD_LENGTH and dictionary.contains(next_prefix):
            found.add(next_prefix)

        visited[cell.row][cell.col] = True
        for neighbor in neighbors(cell, size):
            if not visited[neighbor.row][neighbor.col]:
                dfs(neighbor, next_prefix)
        visited[cell.row][cell.col] = False

    for root in grid.cells():
        for row in visited:
            row[:] = [False] * size
        dfs(root, "")

    logger.debug("Solved %dx%d grid: %d words", size, size, len(found))
    return found


def find_path(grid: Grid, word: str) -> Optional[List[Cell]]:
    """
    Find one legal path spelling `word` on the grid.

    Returns the path as a list of cells, or None if the word cannot be traced.
    `word` must already be normalised to the grid's casing.
    """
    if not word:
        return None

    size = grid.size
    path: List[Cell] = []
    visited = [[False] * size for _ in range(size)]

    def dfs(cell: Cell, index: int) -> bool:
        if grid.letter(cell) != word[index]:
            return False
        path.append(cell)
        if index == len(word) - 1:
            return True
        visited[cell.row][cell.col] = True
        for neighbor in neighbors(cell, size):
            if not visited[neighbor.row][neighbor.col] and dfs(neighbor, index + 1):
                return True
        visited[cell.row][cell.col] = False
        path.pop()
        return False

    for root in grid.cells():
        if dfs(root, 0):
            return path
    return None
