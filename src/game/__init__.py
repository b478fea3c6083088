"""Game layer: grid generation, selection, scoring and round control."""

from .models import (
    GameConfig,
    GenerationStats,
    PathChange,
    SubmissionOutcome,
    SubmissionResult,
    RoundState,
    RoundResult,
    HighScoreEntry,
)
from .dice import DiceGridGenerator, DICE_TR, DICE_EXTENDED_TR, DICE_EN, DICE_PRESETS, build_dice_pool, resolve_dice_pools
from .scoring import SCORING, score_word, total_score
from .selection import SelectionPathTracker
from .submission import submit_word
from .highscores import HighScoreTable
from .round import RoundController

__all__ = [
    "GameConfig",
    "GenerationStats",
    "PathChange",
    "SubmissionOutcome",
    "SubmissionResult",
    "RoundState",
    "RoundResult",
    "HighScoreEntry",
    "DiceGridGenerator",
    "DICE_TR",
    "DICE_EXTENDED_TR",
    "DICE_EN",
    "DICE_PRESETS",
    "build_dice_pool",
    "resolve_dice_pools",
    "SCORING",
    "score_word",
    "total_score",
    "SelectionPathTracker",
    "submit_word",
    "HighScoreTable",
    "RoundController",
]
