"""
Selection tracker for building a word by dragging across grid cells.

Applies the same adjacency and no-repeat rules as the solver, one input
event at a time, and reports every change to an optional listener.
"""

from typing import Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..solver.grid import in_bounds, is_adjacent, word_for_path
from ..solver.models import Cell, Grid
from .models import PathChange, PathChangeKind, SelectionState


class SelectionPathTracker(BaseModel):
    """
    Tracks the path a player is selecting on a grid.

    The tracker is IDLE while the path is empty and BUILDING otherwise.
    Illegal targets (off the grid, not touching the last cell, already
    selected) are ignored without changing state.

    Attributes:
        grid: The committed grid being played
        path: Cells selected so far, in order
        is_pressed: Whether a press is in progress
        moved: Whether a move added a cell during the current press
        on_change: Optional listener called with a PathChange after each change
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    grid: Grid
    path: List[Cell] = Field(default_factory=list)
    is_pressed: bool = False
    moved: bool = False
    on_change: Optional[Callable[[PathChange], None]] = Field(default=None, exclude=True)

    @property
    def state(self) -> SelectionState:
        return "BUILDING" if self.path else "IDLE"

    @property
    def word(self) -> str:
        """Letters along the current path."""
        return word_for_path(self.grid, self.path)

    def contains(self, cell: Cell) -> bool:
        return cell in self.path

    def select(self, target: Optional[Cell]) -> Optional[PathChangeKind]:
        """
        Apply one target cell to the path.

        Args:
            target: The cell under the pointer, or None if it is off the grid

        Returns:
            "added" or "removed" if the path changed, None if the input was ignored
        """
        if target is None:
            return None
        target = Cell(*target)
        if not in_bounds(target, self.grid.size):
            return None

        if not self.path:
            self.path.append(target)
            self._emit("added", target)
            return "added"

        # Dragging back onto the previous cell undoes the last selection
        if len(self.path) > 1 and target == self.path[-2]:
            removed = self.path.pop()
            self._emit("removed", removed)
            return "removed"

        if is_adjacent(self.path[-1], target) and target not in self.path:
            self.path.append(target)
            self._emit("added", target)
            return "added"

        return None

    def clear(self) -> None:
        """Empty the path and return to IDLE."""
        self.path = []
        self._emit("cleared", None)

    def finalize(self) -> str:
        """Read the candidate word without changing the path."""
        return self.word

    def press(self, target: Optional[Cell]) -> Optional[PathChangeKind]:
        """
        Start a press on `target`.

        A press outside the grid does not start an interaction.
        """
        if target is None or not in_bounds(Cell(*target), self.grid.size):
            return None
        self.is_pressed = True
        self.moved = False
        return self.select(target)

    def move(self, target: Optional[Cell]) -> Optional[PathChangeKind]:
        """Extend or backtrack the path while a press is in progress."""
        if not self.is_pressed:
            return None
        change = self.select(target)
        if change == "added":
            self.moved = True
        return change

    def release(self) -> bool:
        """
        End the current press.

        Returns:
            True if the path was built by dragging and should be submitted now;
            False for a stationary tap, which leaves the path for manual submission
        """
        if not self.is_pressed:
            return False
        self.is_pressed = False
        should_submit = self.moved and len(self.path) >= 2
        self.moved = False
        return should_submit

    def _emit(self, kind: PathChangeKind, cell: Optional[Cell]) -> None:
        if self.on_change is not None:
            self.on_change(PathChange(kind=kind, cell=cell, path=list(self.path), word=self.word))
