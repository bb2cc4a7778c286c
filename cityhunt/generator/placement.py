"""
Single-word placement on a scratch grid.

The scratch grid lives for one board attempt only. It tracks a letter and a
list of owner ids per cell so that overlapping words can share cells whose
letters agree.
"""

import logging
import random
from typing import List, Optional, Set

from .models import Cell, Direction, DIRECTIONS

logger = logging.getLogger(__name__)


class ScratchGrid:
    """Mutable working grid for one generation attempt."""

    def __init__(self, size: int):
        self.size = size
        self.letters: List[List[str]] = [['' for _ in range(size)] for _ in range(size)]
        self.owners: List[List[List[str]]] = [[[] for _ in range(size)] for _ in range(size)]

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.size and 0 <= cell.col < self.size

    def fits(self, word: str, start: Cell, direction: Direction) -> Optional[List[Cell]]:
        """Return the path for word at start along direction, or None on a clash."""
        end = direction.step(start, len(word) - 1)
        if not self.in_bounds(end):
            return None

        path: List[Cell] = []
        for i, letter in enumerate(word):
            cell = direction.step(start, i)
            existing = self.letters[cell.row][cell.col]
            if existing and existing != letter:
                return None
            path.append(cell)
        return path

    def write(self, word: str, path: List[Cell], owner_id: str) -> None:
        """Write word along path and register owner_id on each cell."""
        for cell, letter in zip(path, word):
            self.letters[cell.row][cell.col] = letter
            self.owners[cell.row][cell.col].append(owner_id)

    def fill(self, rng: random.Random, alphabet: str) -> List[List[str]]:
        """Fill every empty cell with a random letter and return a fresh letter grid."""
        return [
            [letter or rng.choice(alphabet) for letter in row]
            for row in self.letters
        ]


def direction_order(used: Set[Direction], rng: random.Random) -> List[Direction]:
    """All directions shuffled, those not yet used on this board first."""
    shuffled = list(DIRECTIONS)
    rng.shuffle(shuffled)
    unused = [d for d in shuffled if d not in used]
    repeats = [d for d in shuffled if d in used]
    return unused + repeats


def try_place_in_direction(
    scratch: ScratchGrid,
    word: str,
    owner_id: str,
    direction: Direction,
    rng: random.Random,
    anchor_attempts: int
) -> Optional[List[Cell]]:
    """Try random anchors for word along one direction. Returns the path or None."""
    for _ in range(anchor_attempts):
        start = Cell(rng.randrange(scratch.size), rng.randrange(scratch.size))
        path = scratch.fits(word, start, direction)
        if path is None:
            continue
        scratch.write(word, path, owner_id)
        return path
    return None


def try_place_word(
    scratch: ScratchGrid,
    word: str,
    owner_id: str,
    used: Set[Direction],
    rng: random.Random,
    anchor_attempts: int
) -> Optional[List[Cell]]:
    """
    Place word on the scratch grid, preferring directions not yet used.

    On success the chosen direction is added to `used` and the path returned.
    Returns None if every direction ran out of anchors.
    """
    for direction in direction_order(used, rng):
        path = try_place_in_direction(scratch, word, owner_id, direction, rng, anchor_attempts)
        if path is not None:
            used.add(direction)
            return path

    logger.debug("No anchor fits %s in any direction", word)
    return None
