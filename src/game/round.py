import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field

from ..solver import Cell, Dictionary, Grid, load_dictionary, solve
from .dice import DiceGridGenerator
from .highscores import HighScoreTable
from .models import GameConfig, GenerationStats, PathChange, PathChangeKind, RoundResult, RoundState, SubmissionResult
from .selection import SelectionPathTracker
from .submission import submit_word


logger = logging.getLogger(__name__)


class RoundController(BaseModel):
    """
    Owns one round of play.

    Holds the committed grid, the round state (found words and score), the
    selection tracker and the countdown. Input events and timer ticks come
    from outside; the controller turns them into submissions and, when time
    runs out, a RoundResult.

    Attributes:
        config: Round configuration
        dictionary: Word list used for solving and submissions
        state: Grid, found words and score for this round
        tracker: Path selection state machine for this round
        time_remaining: Seconds left on the clock
        is_active: Whether input is currently accepted
        is_complete: Whether the round has ended
        generation: Statistics from generating the grid, if it was generated
        high_scores: Optional high-score table updated at round end
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    dictionary: Any = Field(default=None, exclude=True)
    state: RoundState
    tracker: SelectionPathTracker
    time_remaining: int = 0
    is_active: bool = False
    is_complete: bool = False
    generation: Optional[GenerationStats] = None
    submissions: List[SubmissionResult] = Field(default_factory=list)
    high_scores: Optional[HighScoreTable] = None
    result: Optional[RoundResult] = None
    started_at: Optional[datetime] = None
    on_submission: Optional[Callable[[SubmissionResult], None]] = Field(default=None, exclude=True)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        dictionary: Optional[Dictionary] = None,
        **config_kwargs: Any
    ) -> "RoundController":
        """
        Factory method to create a round with a freshly generated grid.

        Args:
            config: Optional GameConfig instance
            dictionary: Word list; loaded from config.dictionary_path if omitted
            **config_kwargs: Config parameters if config not provided

        Returns:
            RoundController ready to start()

        Raises:
            ValueError: If no dictionary is given and the config names no file
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if dictionary is None:
            if not config.dictionary_path:
                raise ValueError("A dictionary or config.dictionary_path is required")
            dictionary = load_dictionary(config.dictionary_path, language=config.language)

        generator = DiceGridGenerator(seed=config.seed, language=config.language)
        grid = generator.generate_for_config(config, dictionary)

        round_ = cls.from_grid(grid, config=config, dictionary=dictionary)
        round_.generation = generator.last_stats
        return round_

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        config: Optional[GameConfig] = None,
        dictionary: Optional[Dictionary] = None,
    ) -> "RoundController":
        """Create a round on an already committed grid."""
        if config is None:
            config = GameConfig()
        if dictionary is None:
            if not config.dictionary_path:
                raise ValueError("A dictionary or config.dictionary_path is required")
            dictionary = load_dictionary(config.dictionary_path, language=config.language)

        high_scores = None
        if config.high_scores_path:
            high_scores = HighScoreTable.load(config.high_scores_path, limit=config.high_score_limit)

        return cls(
            config=config,
            dictionary=dictionary,
            state=RoundState(grid=grid),
            tracker=SelectionPathTracker(grid=grid),
            time_remaining=config.round_duration,
            high_scores=high_scores,
        )

    @property
    def grid(self) -> Grid:
        return self.state.grid

    @property
    def score(self) -> int:
        return self.state.score

    def set_path_listener(self, listener: Optional[Callable[[PathChange], None]]) -> None:
        """Forward path changes (cell added / removed / cleared) to `listener`."""
        self.tracker.on_change = listener

    def start(self) -> None:
        """Reset the round state and start the clock."""
        self.state = RoundState(grid=self.state.grid)
        self.tracker.clear()
        self.submissions = []
        self.time_remaining = self.config.round_duration
        self.is_active = True
        self.is_complete = False
        self.result = None
        self.started_at = datetime.now()

    def press(self, cell: Optional[Cell]) -> Optional[PathChangeKind]:
        if not self.is_active:
            return None
        return self.tracker.press(cell)

    def move(self, cell: Optional[Cell]) -> Optional[PathChangeKind]:
        if not self.is_active:
            return None
        return self.tracker.move(cell)

    def select(self, cell: Optional[Cell]) -> Optional[PathChangeKind]:
        """Apply one tap or keyboard selection outside a press."""
        if not self.is_active:
            return None
        return self.tracker.select(cell)

    def release(self) -> Optional[SubmissionResult]:
        """
        End a press; a dragged path is submitted immediately.

        Returns:
            The submission result for a dragged path, None for a tap
        """
        if self.tracker.release() and self.is_active:
            return self.submit(auto=True)
        return None

    def clear(self) -> None:
        self.tracker.clear()

    def submit(self, auto: bool = False) -> SubmissionResult:
        """
        Submit the selected path's word and clear the selection.

        Args:
            auto: Whether the submission comes from releasing a drag

        Returns:
            SubmissionResult describing the outcome
        """
        word = self.tracker.finalize()

        if not self.is_active:
            result = SubmissionResult(word=word, outcome="ROUND_INACTIVE", total_score=self.state.score, auto=auto)
        else:
            result = submit_word(self.state, word, self.dictionary, language=self.config.language, auto=auto)
            self.submissions.append(result)
            logger.debug("Submitted %s: %s (+%d)", result.word, result.outcome, result.points)

        self.tracker.clear()
        if self.on_submission:
            self.on_submission(result)
        return result

    def trace(self, path: Sequence[Cell]) -> Optional[SubmissionResult]:
        """
        Drag along `path` in one press and submit the result.

        A single-cell path is a tap, so it is submitted explicitly.
        """
        if not path:
            return None
        self.press(path[0])
        for cell in path[1:]:
            self.move(cell)
        result = self.release()
        if result is None and self.tracker.path:
            result = self.submit()
        return result

    def tick(self, seconds: int = 1) -> bool:
        """
        Advance the clock.

        Returns:
            True on the tick that ends the round, False otherwise

        Raises:
            ValueError: If seconds is negative
        """
        if seconds < 0:
            raise ValueError(f"seconds must not be negative, got {seconds}")
        if not self.is_active:
            return False
        self.time_remaining = max(0, self.time_remaining - seconds)
        if self.time_remaining == 0:
            self.end()
            return True
        return False

    def end(self) -> RoundResult:
        """
        Finish the round: stop input, find missed words and record the score.

        Calling end() again returns the same result.
        """
        if self.is_complete and self.result is not None:
            return self.result

        self.is_active = False
        self.is_complete = True
        self.tracker.clear()

        solvable = solve(self.state.grid, self.dictionary)
        found = set(self.state.found_words)
        missed = sorted(solvable - found, key=lambda w: (-len(w), w))

        made_table = False
        if self.high_scores is not None:
            made_table = self.high_scores.record(self.state.score, name=self.config.player_name)
            if made_table and self.config.high_scores_path:
                self.high_scores.save(self.config.high_scores_path)

        logger.info(
            "Round over: score %d, %d/%d words found",
            self.state.score, len(found), len(solvable),
        )

        self.result = self._build_result(missed, len(solvable), made_table)
        return self.result

    def get_state(self) -> Dict:
        """
        Get the current round state.

        Returns:
            Dictionary containing round state
        """
        return {
            "grid": self.state.grid.to_lists(),
            "score": self.state.score,
            "found_words": list(self.state.found_words),
            "time_remaining": self.time_remaining,
            "is_active": self.is_active,
            "is_complete": self.is_complete,
            "selection": self.tracker.state,
            "current_word": self.tracker.word,
        }

    def get_result(self) -> RoundResult:
        """
        Get the round result, ending the round first if it is still running.

        Returns:
            RoundResult containing full round data
        """
        if self.result is None:
            return self.end()
        return self.result

    def save_result(self, path: str | Path) -> None:
        """
        Save the round result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding="utf-8") as f:
            json.dump(result.model_dump(), f, indent=2, default=str, ensure_ascii=False)

    def _build_result(self, missed: List[str], solvable_count: int, made_table: bool) -> RoundResult:
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        return RoundResult(
            config=self.config,
            grid=self.state.grid.to_lists(),
            score=self.state.score,
            found_words=list(self.state.found_words),
            missed_words=missed,
            solvable_count=solvable_count,
            generation=self.generation,
            submissions=list(self.submissions),
            high_score=made_table,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )
