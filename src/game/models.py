"""
Pydantic models for the game layer.

This module contains the data models (configuration, generation statistics,
submission outcomes, round state and results) used throughout the game layer.
The logic classes (DiceGridGenerator, SelectionPathTracker, RoundController,
HighScoreTable) live in their respective files.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field, field_validator

from ..solver.models import Cell, Grid


# Type aliases
GridSize = Literal[4, 5]
DicePreset = Literal["tr", "en"]
SelectionState = Literal["IDLE", "BUILDING"]
PathChangeKind = Literal["added", "removed", "cleared"]
SubmissionOutcome = Literal[
    "ACCEPTED",
    "TOO_SHORT",
    "DUPLICATE",
    "NOT_IN_DICTIONARY",
    "ROUND_INACTIVE",
]


class GameConfig(BaseModel):
    """Configuration for a round of play."""
    grid_size: GridSize = 4
    round_duration: int = Field(default=45, ge=1)  # seconds
    countdown: int = Field(default=3, ge=0)
    min_words: int = Field(default=15, ge=0)
    max_attempts: int = Field(default=50, ge=1)
    dice_preset: DicePreset = "tr"
    dice_base: Optional[List[str]] = None  # Overrides the preset when given
    dice_extended: Optional[List[str]] = None
    language: Literal["tr", "en"] = "tr"
    dictionary_path: Optional[str] = None
    high_scores_path: Optional[str] = None
    high_score_limit: int = Field(default=10, ge=1)
    missed_words_limit: int = Field(default=50, ge=0)
    player_name: Optional[str] = None
    seed: Optional[int] = None

    @field_validator("dice_base", "dice_extended")
    @classmethod
    def check_dice(cls, dice: Optional[List[str]]) -> Optional[List[str]]:
        if dice is None:
            return dice
        for die in dice:
            if len(die) != 6:
                raise ValueError(f"Die '{die}' must have exactly 6 faces, got {len(die)}")
        return dice


class GenerationStats(BaseModel):
    """Diagnostics from the most recent grid generation."""
    attempts: int = 0
    word_count: int = 0
    min_words: int = 0
    met_threshold: bool = False
    dice: List[str] = Field(default_factory=list)  # Die assigned to each position, row-major


class PathChange(BaseModel):
    """Event emitted whenever the selected path changes."""
    kind: PathChangeKind
    cell: Optional[Cell] = None
    path: List[Cell] = Field(default_factory=list)
    word: str = ""


class SubmissionResult(BaseModel):
    """Outcome of submitting a candidate word."""
    word: str
    outcome: SubmissionOutcome
    points: int = 0
    total_score: int = 0
    auto: bool = False  # Submitted by releasing a drag
    silent: bool = False  # UI should not show feedback for this outcome

    @property
    def accepted(self) -> bool:
        return self.outcome == "ACCEPTED"


class RoundState(BaseModel):
    """Everything one round owns: its grid, accepted words and score."""
    grid: Grid
    found_words: List[str] = Field(default_factory=list)  # Insertion order kept for display
    score: int = 0

    def has_found(self, word: str) -> bool:
        return word in self.found_words


class RoundResult(BaseModel):
    """Result of a finished round."""
    config: GameConfig
    grid: List[List[str]] = Field(default_factory=list)
    score: int = 0
    found_words: List[str] = Field(default_factory=list)
    missed_words: List[str] = Field(default_factory=list)
    solvable_count: int = 0
    generation: Optional[GenerationStats] = None
    submissions: List[SubmissionResult] = Field(default_factory=list)
    high_score: bool = False  # Score made it into the high-score table
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0


class HighScoreEntry(BaseModel):
    """One row of the high-score table."""
    score: int
    date: str
    timestamp: int  # Milliseconds since the epoch
    name: Optional[str] = None
