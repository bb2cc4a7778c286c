"""
Main entry point for generating and playing City Hunt boards.

Usage:
    python -m cityhunt.main
    python -m cityhunt.main config.yaml --solution
    python -m cityhunt.main config.yaml --output boards/board.json --play
"""

import argparse
import logging
import random
import re
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import yaml

from .generator import (
    Board,
    BoardGenerator,
    BoardUnsatisfiable,
    Cell,
    EUROPEAN_CITIES,
    GeneratorConfig,
    check_board,
    pick_batch,
    render_grid,
    solution_cells,
)
from .selection import SelectionTracker, Verdict


def load_config(config_path: str) -> GeneratorConfig:
    """Load generator configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GeneratorConfig(**data)


def build_board(config: GeneratorConfig) -> Board:
    """Shuffle the word source with the configured seed and generate a board."""
    rng = random.Random(config.seed)
    candidates = pick_batch(config.words or EUROPEAN_CITIES, rng)
    generator = BoardGenerator(config=config, rng=rng)
    return generator.generate(candidates)


def parse_cells(line: str) -> List[Cell]:
    """Parse a gesture line such as '0,0 0,1 0,2' into cells."""
    return [Cell(int(r), int(c)) for r, c in re.findall(r'(-?\d+)\s*,\s*(-?\d+)', line)]


def replay_gesture(
    tracker: SelectionTracker,
    board: Board,
    cells: List[Cell],
    abandon: bool = False
) -> Optional[Verdict]:
    """
    Feed one gesture through the tracker, ignoring cells off the grid.

    With abandon=True the drag is cancelled instead of ended, as when the
    pointer leaves the board, and no verdict is produced.
    """
    on_grid = [c for c in cells if 0 <= c.row < board.grid_size and 0 <= c.col < board.grid_size]
    if not on_grid:
        return None

    tracker.begin(on_grid[0], board.letter_at(on_grid[0]))
    for cell in on_grid[1:]:
        tracker.extend(cell, board.letter_at(cell))

    if abandon:
        tracker.cancel()
        return None
    return tracker.end()


def describe(verdict: Verdict) -> str:
    if verdict.kind == "too_short":
        return "Too short: select at least two letters"
    if verdict.kind == "match":
        return f"Found {verdict.word.display_name}!"
    return f"'{verdict.attempted}' is not a hidden city"


def play(board: Board, stream: TextIO = sys.stdin) -> int:
    """
    Terminal play loop.

    Each line is one gesture given as row,col pairs. A line ending in '!'
    abandons the drag without a verdict, 'q' quits. Returns the number of
    words found.
    """
    tracker = SelectionTracker.for_board(board)

    print(render_grid(board))
    print()
    print(f"Find {len(board.words)} cities. Enter cells as 'row,col row,col ...', "
          "end with '!' to let go off the board, 'q' to quit.")

    for line in stream:
        line = line.strip()
        if line.lower() in ("q", "quit"):
            break
        if not line:
            continue

        abandon = line.endswith("!")
        cells = parse_cells(line)
        if not cells:
            print("No cells in that gesture")
            continue

        verdict = replay_gesture(tracker, board, cells, abandon=abandon)
        if abandon:
            print("Selection cancelled")
            continue
        if verdict is None:
            print("No cells on the grid in that gesture")
            continue

        print(describe(verdict))
        if verdict.is_match:
            print(render_grid(board, highlight=solution_cells(board, found_only=True)))
        if tracker.all_found:
            print("All cities found!")
            break

    return sum(1 for w in board.words if w.found)


def main():
    parser = argparse.ArgumentParser(
        description="Generate a City Hunt word-search board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 12
  words_per_board: 6
  seed: 42
  anchor_attempts: 60
  board_attempts: 40
  words:
    - Lisbon
    - Paris
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used when omitted)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides the config file)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the board as JSON"
    )
    parser.add_argument(
        "--solution",
        action="store_true",
        help="Show hidden words in uppercase and filler in lowercase"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Re-verify the generated board and fail on any problem"
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Play the board in the terminal"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GeneratorConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.seed is not None:
        config = config.model_copy(update={"seed": args.seed})

    try:
        board = build_board(config)
    except BoardUnsatisfiable as e:
        print(f"Error generating board: {e}", file=sys.stderr)
        return 1

    if args.check:
        problems = check_board(board)
        for problem in problems:
            print(f"{problem.code}: {problem.message}", file=sys.stderr)
        if problems:
            return 1

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(board.model_dump_json(indent=2))
        print(f"Board saved to: {output_path}")

    if args.play:
        found = play(board)
        print()
        print(f"Found {found} of {len(board.words)} cities")
        return 0

    highlight = solution_cells(board) if args.solution else None
    print(render_grid(board, highlight=highlight))

    # Print summary
    print()
    print("=== Hidden Cities ===")
    for word in board.words:
        if args.solution:
            start, end = word.path[0], word.path[-1]
            print(f"{word.display_name:<14} {word.normalized:<14} {tuple(start)} -> {tuple(end)}")
        else:
            print(word.display_name)
    for warning in board.warnings:
        print(f"Warning: {warning.message}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
