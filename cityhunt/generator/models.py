"""Data models for board generation."""

from typing import List, Optional, NamedTuple
from pydantic import BaseModel, Field


class Cell(NamedTuple):
    """A grid coordinate."""
    row: int
    col: int


class Direction(NamedTuple):
    """A unit step between 8-adjacent cells."""
    drow: int
    dcol: int

    @classmethod
    def between(cls, start: Cell, end: Cell) -> Optional["Direction"]:
        """Direction of a single step from start to end, or None if not adjacent."""
        drow = end[0] - start[0]
        dcol = end[1] - start[1]
        if (drow, dcol) == (0, 0) or abs(drow) > 1 or abs(dcol) > 1:
            return None
        return cls(drow, dcol)

    def step(self, cell: Cell, times: int = 1) -> Cell:
        return Cell(cell[0] + self.drow * times, cell[1] + self.dcol * times)


DIRECTIONS: List[Direction] = [
    Direction(0, 1),
    Direction(1, 0),
    Direction(0, -1),
    Direction(-1, 0),
    Direction(1, 1),
    Direction(1, -1),
    Direction(-1, 1),
    Direction(-1, -1),
]


class PlacedWord(BaseModel):
    """A word hidden on the board. Only `found` may change after placement."""
    id: str = Field(..., frozen=True)
    display_name: str = Field(..., frozen=True)
    normalized: str = Field(..., min_length=2, pattern=r'^[A-Z]+$', frozen=True)
    path: List[Cell] = Field(..., frozen=True)
    direction: Direction = Field(..., frozen=True)
    found: bool = False


class GenerationWarning(BaseModel):
    """A soft condition raised while preparing a board."""
    code: str
    message: str
    word: Optional[str] = None


class Board(BaseModel):
    """A finished board: filled grid plus the words hidden in it."""
    grid_size: int
    grid: List[List[str]]
    words: List[PlacedWord] = Field(default_factory=list)
    warnings: List[GenerationWarning] = Field(default_factory=list)
    attempts: int = 1  # Outer attempts used to place every word

    def letter_at(self, cell: Cell) -> str:
        """Letter at a cell."""
        return self.grid[cell[0]][cell[1]]

    @property
    def remaining(self) -> List[PlacedWord]:
        """Words not yet found."""
        return [w for w in self.words if not w.found]


class GeneratorConfig(BaseModel):
    """Configuration for board generation."""
    grid_size: int = Field(default=12, ge=2)
    words_per_board: int = Field(default=6, ge=1)
    anchor_attempts: int = Field(default=60, ge=1)
    board_attempts: int = Field(default=40, ge=1)
    seed: Optional[int] = None
    words: Optional[List[str]] = None  # Defaults to the built-in city list
