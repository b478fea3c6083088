import logging
import random
from typing import List, Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict

from ..solver import Dictionary, Grid, Language, normalize_word, solve
from .models import GameConfig, GenerationStats


logger = logging.getLogger(__name__)

# Turkish dice, approximate letter frequencies
DICE_TR: List[str] = [
    "AEEGMN", "AAEOOT", "AIIŞST", "EİİOŞT",
    "AABFKP", "EEGHNV", "DEİLRY", "DEİLĞR",
    "BJKLMZ", "EEİNSU", "EHRTVZ", "HLNNRZ",
    "IMOTUÜ", "AÇELRS", "DİSTTY", "OÖPRTY",
]

# Extra dice for 5x5 (Big Boggle style extension)
DICE_EXTENDED_TR: List[str] = [
    "AAAFRS", "AAEEEE", "AAFIRS", "ADENNN", "AEEEEM",
    "AEEGMU", "AEGMNN", "AFIRSY", "BJKQXZ", "CCENST",
    "CEIILT", "CEILPT", "CEIPST", "DDHNOT", "DHHLOR",
    "DHLNOR", "DDLNOR", "EIIITT", "EMOTTT", "ENSSSU",
    "FIPRSY", "GORRVW", "HIPRRY", "NOOTUW", "OOOTTU",
]

# "New" Boggle dice, 1987 to ~2008
DICE_EN: List[str] = [
    "AAEEGN", "ACHOPS", "AFFKPS", "ABBJOO",
    "CIIMOT", "DELRVY", "DEILRX", "EEINSU",
    "EEGHNW", "HLNNRZ", "DISTTY", "AOOTTW",
    "ELRTTY", "EIOSST", "EHRTUV", "HIMNQU",
]

DICE_PRESETS: Dict[str, Tuple[List[str], List[str]]] = {
    "tr": (DICE_TR, DICE_EXTENDED_TR),
    "en": (DICE_EN, DICE_EXTENDED_TR),
}


def resolve_dice_pools(config: GameConfig) -> Tuple[List[str], List[str]]:
    """Dice pools for a config: explicit pools win over the named preset."""
    base, extended = DICE_PRESETS[config.dice_preset]
    return (
        list(config.dice_base) if config.dice_base is not None else list(base),
        list(config.dice_extended) if config.dice_extended is not None else list(extended),
    )


def build_dice_pool(size: int, dice_base: List[str], dice_extended: List[str]) -> List[str]:
    """
    Assemble the dice to sample from for a grid of `size`.

    The base pool is used alone for 4x4; 5x5 adds the extended pool. The
    assembled pool is repeated whole until it holds at least size² dice.

    Raises:
        ValueError: If the assembled pool is empty or a die does not have 6 faces
    """
    pool = list(dice_base) if size <= 4 else list(dice_base) + list(dice_extended)
    if not pool:
        raise ValueError(f"No dice available for a {size}x{size} grid")
    for die in pool:
        if len(die) != 6:
            raise ValueError(f"Die '{die}' must have exactly 6 faces, got {len(die)}")

    needed = size * size
    source = list(pool)
    while len(pool) < needed:
        pool.extend(source)
    return pool


class DiceGridGenerator(BaseModel):
    """
    Rolls letter grids from physical dice and keeps the most solvable one.

    Attributes:
        seed: Optional random seed for reproducibility
        language: Casing rules applied to rolled faces
        last_stats: Diagnostics from the most recent call to `generate`
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    seed: Optional[int] = None
    language: Language = "tr"
    last_stats: Optional[GenerationStats] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    def roll(self, size: int, dice_base: List[str], dice_extended: List[str]) -> Tuple[Grid, List[str]]:
        """
        Shuffle the pool, deal size² dice and roll each one.

        Returns:
            The rolled grid and the die used at each position (row-major)
        """
        pool = build_dice_pool(size, dice_base, dice_extended)
        self._rng.shuffle(pool)
        dice = pool[:size * size]

        rows = []
        for i in range(size):
            row = []
            for j in range(size):
                die = dice[i * size + j]
                row.append(normalize_word(self._rng.choice(die), self.language))
            rows.append(tuple(row))
        return Grid(rows=tuple(rows)), dice

    def generate(
        self,
        size: int,
        dice_base: List[str],
        dice_extended: List[str],
        dictionary: Dictionary,
        min_words: int,
        max_attempts: int,
    ) -> Grid:
        """
        Roll grids until one holds at least `min_words` solvable words.

        Stops at the first qualifying grid. If none of `max_attempts` rolls
        qualifies, the grid with the most words is returned instead.

        Raises:
            ValueError: If max_attempts is less than 1
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        best_grid: Optional[Grid] = None
        best_dice: List[str] = []
        max_found = -1

        for attempt in range(1, max_attempts + 1):
            grid, dice = self.roll(size, dice_base, dice_extended)
            word_count = len(solve(grid, dictionary))
            logger.debug("Attempt %d: %d words", attempt, word_count)

            if word_count >= min_words:
                logger.info("Grid generated in %d attempts with %d words.", attempt, word_count)
                self.last_stats = GenerationStats(
                    attempts=attempt,
                    word_count=word_count,
                    min_words=min_words,
                    met_threshold=True,
                    dice=dice,
                )
                return grid

            if word_count > max_found:
                max_found = word_count
                best_grid, best_dice = grid, dice

        # Fall back to the best grid seen
        logger.warning("Could not find %d words. Best was %d.", min_words, max_found)
        self.last_stats = GenerationStats(
            attempts=max_attempts,
            word_count=max_found,
            min_words=min_words,
            met_threshold=False,
            dice=best_dice,
        )
        return best_grid

    def generate_for_config(self, config: GameConfig, dictionary: Dictionary) -> Grid:
        """Generate a grid using the size, dice and thresholds from `config`."""
        dice_base, dice_extended = resolve_dice_pools(config)
        return self.generate(
            size=config.grid_size,
            dice_base=dice_base,
            dice_extended=dice_extended,
            dictionary=dictionary,
            min_words=config.min_words,
            max_attempts=config.max_attempts,
        )
