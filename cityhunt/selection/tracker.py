"""
Selection tracker for managing a single drag gesture over the grid.

Keeps the gesture on one straight, contiguous line and, when the gesture
ends, matches the selected letters (forwards or backwards) against the
words still hidden on the board.
"""

import logging
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from ..generator.models import Board, Cell, Direction, PlacedWord
from .models import TrackerState, Verdict

logger = logging.getLogger(__name__)


class SelectionTracker(BaseModel):
    """
    Two-state machine (idle, dragging) driven by pointer events.

    Invalid input is absorbed silently: a rejected cell leaves the path as
    it was, and calls made in the wrong state are ignored.

    Attributes:
        words: The board's placed words; matches flip their `found` flag
        state: "idle" or "dragging"
        path: Cells selected so far in this gesture
        letters: Letters of those cells, in the same order
        direction: Step direction, committed once the path has two cells
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    words: List[PlacedWord] = Field(default_factory=list)
    state: TrackerState = "idle"
    path: List[Cell] = Field(default_factory=list)
    letters: List[str] = Field(default_factory=list)
    direction: Optional[Direction] = None

    @classmethod
    def for_board(cls, board: Board) -> "SelectionTracker":
        """Create a tracker bound to a board's words."""
        return cls(words=board.words)

    @property
    def attempted(self) -> str:
        """Letters selected so far."""
        return ''.join(self.letters)

    @property
    def remaining(self) -> List[PlacedWord]:
        """Words not yet found."""
        return [w for w in self.words if not w.found]

    @property
    def all_found(self) -> bool:
        return all(w.found for w in self.words)

    def begin(self, cell: Cell, letter: str) -> None:
        """Start a gesture on a cell."""
        if self.state != "idle":
            logger.debug("begin(%s) ignored while dragging", cell)
            return

        self.state = "dragging"
        self.path = [Cell(*cell)]
        self.letters = [letter.upper()]
        self.direction = None

    def extend(self, cell: Cell, letter: str) -> bool:
        """
        Offer the next cell of the gesture.

        The cell is appended only if it is new, one step from the last cell,
        and (after the second cell) continues in the committed direction.

        Returns:
            True if the cell was appended
        """
        if self.state != "dragging" or not self.path:
            return False

        cell = Cell(*cell)
        if cell in self.path:
            return False

        step = Direction.between(self.path[-1], cell)
        if step is None:
            logger.debug("extend(%s) rejected: not adjacent to %s", cell, self.path[-1])
            return False

        if len(self.path) == 1:
            self.direction = step
        elif step != self.direction:
            logger.debug("extend(%s) rejected: step %s breaks direction %s", cell, step, self.direction)
            return False

        self.path.append(cell)
        self.letters.append(letter.upper())
        return True

    def end(self) -> Optional[Verdict]:
        """
        Finish the gesture and judge the selection.

        Returns:
            A Verdict, or None if no gesture was in progress
        """
        if self.state != "dragging":
            return None

        attempted = self.attempted
        path = list(self.path)
        self._reset()

        if len(attempted) < 2:
            return Verdict.too_short(attempted, path)

        reverse = attempted[::-1]
        for word in self.words:
            if word.found:
                continue
            if word.normalized == attempted or word.normalized == reverse:
                word.found = True
                logger.debug("Found %s (%s)", word.display_name, word.id)
                return Verdict.match(word, attempted, path)

        return Verdict.miss(attempted, path)

    def cancel(self) -> None:
        """Abandon the gesture without a verdict. Safe in any state."""
        self._reset()

    def _reset(self) -> None:
        self.state = "idle"
        self.path = []
        self.letters = []
        self.direction = None
