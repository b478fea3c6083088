"""Test dice pools, grid rolling and the generate-with-retry loop."""

import pytest
from pydantic import ValidationError

import src.game.dice as dice_module
from src.game import (
    DICE_EN,
    DICE_EXTENDED_TR,
    DICE_TR,
    DiceGridGenerator,
    GameConfig,
    build_dice_pool,
    resolve_dice_pools,
)
from src.solver import TrieDictionary


TINY_DICTIONARY = TrieDictionary(["CAT", "DOG"], language="en")


def fake_solve(word_counts):
    """Replacement for solve() returning sets of the given sizes in turn."""
    calls = []

    def _solve(grid, dictionary):
        count = word_counts[len(calls)]
        calls.append(grid)
        return {f"W{i}" for i in range(count)}

    return _solve, calls


class TestDicePool:
    """Test pool assembly."""

    def test_four_uses_base_only(self):
        """A 4x4 pool is the base dice."""
        pool = build_dice_pool(4, DICE_TR, DICE_EXTENDED_TR)
        assert pool == DICE_TR

    def test_five_adds_extended(self):
        """A 5x5 pool is base plus extended dice."""
        pool = build_dice_pool(5, DICE_TR, DICE_EXTENDED_TR)
        assert pool == DICE_TR + DICE_EXTENDED_TR
        assert len(pool) >= 25

    def test_small_pool_repeated(self):
        """A pool smaller than size² is repeated whole until it is big enough."""
        base = ["AAAAAA", "BBBBBB", "CCCCCC"]
        pool = build_dice_pool(4, base, [])
        assert len(pool) == 18
        assert pool == base * 6

    def test_small_five_pool_repeats_assembled_pool(self):
        """For 5x5 the base+extended pool is what gets repeated."""
        pool = build_dice_pool(5, ["AAAAAA"], ["BBBBBB"])
        assert len(pool) == 26
        assert pool[:4] == ["AAAAAA", "BBBBBB", "AAAAAA", "BBBBBB"]

    def test_empty_pool(self):
        """An empty pool raises ValueError."""
        with pytest.raises(ValueError):
            build_dice_pool(4, [], DICE_EXTENDED_TR)

    def test_rejects_short_dice(self):
        """Dice without exactly six faces are rejected."""
        with pytest.raises(ValueError):
            build_dice_pool(4, ["ABCDE"] * 16, [])
        with pytest.raises(ValueError):
            build_dice_pool(5, DICE_TR, ["ABCDEFG"])

    def test_preset_resolution(self):
        """Presets supply pools unless the config overrides them."""
        base, extended = resolve_dice_pools(GameConfig(dice_preset="en"))
        assert base == DICE_EN
        assert extended == DICE_EXTENDED_TR

        custom = ["ABCDEF"] * 16
        base, _ = resolve_dice_pools(GameConfig(dice_base=custom))
        assert base == custom


class TestRoll:
    """Test rolling a single grid."""

    @pytest.mark.parametrize("size", [4, 5])
    def test_grid_fully_populated(self, size):
        """A rolled grid has size² single-letter cells."""
        grid, dice = DiceGridGenerator(seed=1, language="en").roll(size, DICE_EN, DICE_EXTENDED_TR)
        assert grid.size == size
        assert len(grid.cells()) == size * size
        assert len(dice) == size * size

    @pytest.mark.parametrize("size", [4, 5])
    def test_letters_come_from_assigned_die(self, size):
        """Every cell shows a face of the die dealt to that position."""
        generator = DiceGridGenerator(seed=5, language="tr")
        for _ in range(10):
            grid, dice = generator.roll(size, DICE_TR, DICE_EXTENDED_TR)
            for index, cell in enumerate(grid.cells()):
                assert grid.letter(cell) in dice[index]

    def test_each_die_used_once(self):
        """A 4x4 roll from 16 distinct dice deals each die exactly once."""
        _, dice = DiceGridGenerator(seed=2).roll(4, DICE_TR, DICE_EXTENDED_TR)
        assert sorted(dice) == sorted(DICE_TR)

    def test_seed_is_reproducible(self):
        """Two generators with the same seed roll the same grid."""
        first, _ = DiceGridGenerator(seed=42).roll(4, DICE_TR, DICE_EXTENDED_TR)
        second, _ = DiceGridGenerator(seed=42).roll(4, DICE_TR, DICE_EXTENDED_TR)
        assert first == second


class TestGenerate:
    """Test the retry loop."""

    def test_early_exit(self, monkeypatch):
        """Generation stops at the first grid meeting the threshold."""
        solve, calls = fake_solve([1, 5, 9])
        monkeypatch.setattr(dice_module, "solve", solve)
        generator = DiceGridGenerator(seed=0)

        grid = generator.generate(4, DICE_TR, DICE_EXTENDED_TR, TINY_DICTIONARY, min_words=5, max_attempts=10)

        assert len(calls) == 2
        assert grid is calls[1]
        assert generator.last_stats.attempts == 2
        assert generator.last_stats.word_count == 5
        assert generator.last_stats.met_threshold is True

    def test_falls_back_to_best(self, monkeypatch):
        """Without a qualifying grid the one with most words is returned."""
        solve, calls = fake_solve([2, 7, 3])
        monkeypatch.setattr(dice_module, "solve", solve)
        generator = DiceGridGenerator(seed=0)

        grid = generator.generate(4, DICE_TR, DICE_EXTENDED_TR, TINY_DICTIONARY, min_words=100, max_attempts=3)

        assert grid is calls[1]
        assert generator.last_stats.word_count == 7
        assert generator.last_stats.met_threshold is False

    def test_first_best_wins_ties(self, monkeypatch):
        """On equal counts the earlier grid is kept."""
        solve, calls = fake_solve([4, 4])
        monkeypatch.setattr(dice_module, "solve", solve)

        grid = DiceGridGenerator(seed=0).generate(4, DICE_TR, DICE_EXTENDED_TR, TINY_DICTIONARY, 10, 2)

        assert grid is calls[0]

    def test_shortfall_uses_every_attempt(self):
        """An unreachable threshold runs exactly max_attempts and still returns a grid."""
        generator = DiceGridGenerator(seed=9, language="en")

        grid = generator.generate(4, DICE_EN, DICE_EXTENDED_TR, TINY_DICTIONARY, min_words=1000, max_attempts=5)

        assert grid.size == 4
        assert len(grid.cells()) == 16
        assert generator.last_stats.attempts == 5
        assert generator.last_stats.met_threshold is False
        for index, cell in enumerate(grid.cells()):
            assert grid.letter(cell) in generator.last_stats.dice[index]

    def test_shortfall_logged(self, caplog):
        """Falling back to the best grid logs a warning."""
        generator = DiceGridGenerator(seed=9, language="en")
        with caplog.at_level("WARNING", logger="src.game.dice"):
            generator.generate(4, DICE_EN, DICE_EXTENDED_TR, TINY_DICTIONARY, min_words=1000, max_attempts=2)
        assert any("Could not find 1000 words" in record.message for record in caplog.records)

    def test_zero_threshold(self):
        """A zero threshold accepts the first grid."""
        generator = DiceGridGenerator(seed=3)
        generator.generate(5, DICE_TR, DICE_EXTENDED_TR, TINY_DICTIONARY, min_words=0, max_attempts=50)
        assert generator.last_stats.attempts == 1
        assert generator.last_stats.met_threshold is True

    def test_invalid_attempts(self):
        """max_attempts below 1 raises ValueError."""
        with pytest.raises(ValueError):
            DiceGridGenerator().generate(4, DICE_TR, DICE_EXTENDED_TR, TINY_DICTIONARY, 1, 0)

    def test_generate_rejects_short_dice(self):
        """generate() refuses dice that do not have six faces."""
        with pytest.raises(ValueError):
            DiceGridGenerator().generate(4, ["ABCDE"] * 16, [], TINY_DICTIONARY, 0, 1)

    def test_generate_for_config(self):
        """Config values drive size and attempts."""
        config = GameConfig(grid_size=5, min_words=1000, max_attempts=3, dice_preset="en", language="en")
        generator = DiceGridGenerator(seed=4, language="en")
        grid = generator.generate_for_config(config, TINY_DICTIONARY)
        assert grid.size == 5
        assert generator.last_stats.attempts == 3


class TestGameConfig:
    """Test configuration validation."""

    def test_defaults(self):
        """Defaults match the standard game."""
        config = GameConfig()
        assert config.grid_size == 4
        assert config.round_duration == 45
        assert config.min_words == 15
        assert config.max_attempts == 50

    def test_rejects_grid_size(self):
        """Only 4x4 and 5x5 grids are playable."""
        with pytest.raises(ValidationError):
            GameConfig(grid_size=6)

    def test_rejects_short_die(self):
        """Every die needs six faces."""
        with pytest.raises(ValidationError):
            GameConfig(dice_base=["ABCDE"])

    def test_rejects_zero_attempts(self):
        """At least one generation attempt is required."""
        with pytest.raises(ValidationError):
            GameConfig(max_attempts=0)
