"""Grid reading, checking and rendering utilities."""

from typing import Iterable, List, Optional, Sequence, Set

from .models import Board, Cell, Direction, GenerationWarning


def read_path(grid: Sequence[Sequence[str]], path: Iterable[Cell]) -> str:
    """Concatenate the letters along a path."""
    return ''.join(grid[row][col] for row, col in path)


def is_straight_path(path: Sequence[Cell]) -> bool:
    """Check that consecutive cells differ by one fixed unit step."""
    if len(path) < 2:
        return True

    direction = Direction.between(path[0], path[1])
    if direction is None:
        return False

    return all(
        Direction.between(a, b) == direction
        for a, b in zip(path, path[1:])
    )


def check_board(board: Board) -> List[GenerationWarning]:
    """Re-verify a finished board. Returns an empty list when the board is sound."""
    problems: List[GenerationWarning] = []
    size = board.grid_size

    if len(board.grid) != size or any(len(row) != size for row in board.grid):
        problems.append(GenerationWarning(
            code="BAD_SHAPE",
            message=f"Grid is not {size}x{size}"
        ))
        return problems

    for r, row in enumerate(board.grid):
        for c, letter in enumerate(row):
            if len(letter) != 1 or not ('A' <= letter <= 'Z'):
                problems.append(GenerationWarning(
                    code="BAD_LETTER",
                    message=f"Cell ({r}, {c}) holds {letter!r}"
                ))

    for word in board.words:
        if any(not (0 <= row < size and 0 <= col < size) for row, col in word.path):
            problems.append(GenerationWarning(
                code="OUT_OF_BOUNDS",
                message=f"'{word.normalized}' leaves the grid",
                word=word.normalized
            ))
            continue

        if not is_straight_path(word.path):
            problems.append(GenerationWarning(
                code="BENT_PATH",
                message=f"'{word.normalized}' is not placed on a straight line",
                word=word.normalized
            ))

        spelled = read_path(board.grid, word.path)
        if spelled != word.normalized:
            problems.append(GenerationWarning(
                code="PATH_MISMATCH",
                message=f"Path of '{word.normalized}' reads '{spelled}'",
                word=word.normalized
            ))

    return problems


def render_grid(board: Board, highlight: Optional[Set[Cell]] = None) -> str:
    """
    Render the grid to a string, one row per line.

    When highlight is given, cells outside it are shown in lowercase.
    """
    lines = []
    for r, row in enumerate(board.grid):
        cells = []
        for c, letter in enumerate(row):
            if highlight is not None and (r, c) not in highlight:
                letter = letter.lower()
            cells.append(letter)
        lines.append(' '.join(cells))
    return '\n'.join(lines)


def solution_cells(board: Board, found_only: bool = False) -> Set[Cell]:
    """Cells covered by placed words (only found ones when found_only)."""
    return {
        cell
        for word in board.words
        if word.found or not found_only
        for cell in word.path
    }
