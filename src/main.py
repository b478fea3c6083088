"""
Main entry point for generating, solving and playing word grids.

Usage:
    python -m src.main config.yaml
    python -m src.main config.yaml --play --verbose
    python -m src.main config.yaml --solve "CATE;ORST;DOGS;NEWS"
"""

import argparse
import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml

from .game import GameConfig, RoundController, SubmissionResult, total_score
from .solver import find_path, load_dictionary, normalize_word, parse_grid, solve
from .utils.grid_visualizer import (
    format_high_scores,
    format_missed_words,
    format_submission,
    format_timer,
    format_word_columns,
    render_board,
)


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def run_countdown(seconds: int, player_name: Optional[str], language: str = "tr") -> None:
    for count in range(seconds, 0, -1):
        print(f"{count}...", flush=True)
        time.sleep(1)
    print(f"GO{' ' + normalize_word(player_name, language) if player_name else ''}!")


def play(controller: RoundController) -> None:
    """
    Play a round in the terminal.

    Each typed word is traced on the grid and dragged through the selection
    tracker; wall-clock seconds drive the round timer. An empty line or EOF
    ends the round early.

    input() blocks, so elapsed time is only applied after each line is
    entered: an idle player does not see the round end until they press
    Enter, and a word entered after the clock ran out is rejected as late
    rather than scored.
    """
    language = controller.config.language

    def show(result: SubmissionResult) -> None:
        message = format_submission(result, language)
        if message:
            print(f"  {message}  [{controller.score}]")

    controller.on_submission = show
    run_countdown(controller.config.countdown, controller.config.player_name, language)
    controller.start()
    last_tick = time.monotonic()

    while controller.is_active:
        print()
        print(render_board(controller.grid))
        print(f"Time {format_timer(controller.time_remaining)}  Score {controller.score}")

        try:
            line = input("> ")
        except EOFError:
            break

        elapsed = int(time.monotonic() - last_tick)
        if elapsed:
            last_tick += elapsed
            if controller.tick(elapsed):
                if line.strip():
                    print(f"  {normalize_word(line, language)} was entered after time ran out")
                print("Time is up!")
                break

        if not line.strip():
            break

        word = normalize_word(line, language)
        path = find_path(controller.grid, word)
        if path is None:
            print(f"  {word} is not on the grid")
            continue
        controller.trace(path)


def main():
    parser = argparse.ArgumentParser(
        description="Generate, solve and play word grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 4
  round_duration: 45
  min_words: 15
  max_attempts: 50
  dice_preset: tr
  language: tr
  dictionary_path: words.txt
  high_scores_path: results/high_scores.json
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--solve",
        metavar="GRID",
        help='Solve a given grid instead of generating one, e.g. "CATE;ORST;DOGS;NEWS"'
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Play a timed round in the terminal"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON (default: results/<timestamp>.json)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and generation details"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if not config.dictionary_path:
        print("Error: config must set dictionary_path", file=sys.stderr)
        sys.exit(1)

    try:
        dictionary = load_dictionary(config.dictionary_path, language=config.language)
    except Exception as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        sys.exit(1)

    # Solve mode: no round, just list the words
    if args.solve:
        try:
            grid = parse_grid(args.solve, language=config.language)
        except ValueError as e:
            print(f"Error parsing grid: {e}", file=sys.stderr)
            sys.exit(1)

        words = sorted(solve(grid, dictionary), key=lambda w: (-len(w), w))
        print(render_board(grid))
        print(f"Found {len(words)} words with total score {total_score(words)}")
        print(format_word_columns(words))
        return 0

    try:
        controller = RoundController.create(config=config, dictionary=dictionary)
    except Exception as e:
        print(f"Error generating grid: {e}", file=sys.stderr)
        sys.exit(1)

    if args.verbose and controller.generation:
        stats = controller.generation
        status = "met" if stats.met_threshold else "NOT met"
        print(f"Generated in {stats.attempts} attempts: {stats.word_count} words (threshold {stats.min_words} {status})")

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"round_{timestamp}.json"

    if args.play:
        try:
            play(controller)
        except KeyboardInterrupt:
            print("\nRound interrupted by user")
    else:
        print(render_board(controller.grid))

    result = controller.end()
    controller.save_result(output_path)

    # Print summary
    print()
    print("=== Round Summary ===")
    print(f"Score: {result.score}")
    print(f"Words found: {len(result.found_words)} / {result.solvable_count}")
    if result.found_words:
        print(format_word_columns(result.found_words))
    print(format_missed_words(result.missed_words, config.missed_words_limit, config.language))
    if controller.high_scores is not None:
        print()
        print(format_high_scores(controller.high_scores, config.language))

    if args.verbose:
        print()
        print(f"Results saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
