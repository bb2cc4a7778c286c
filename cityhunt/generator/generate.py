"""
Board generation for city hunt.

Generates a square letter grid hiding a batch of words:
1. Screen candidates (normalize, skip empty, one-letter or oversized words)
2. Place each word along a straight line, preferring unused directions
3. Restart the whole board when any word cannot be placed
4. Fill the remaining cells with random letters
"""

import logging
import random
import string
from typing import List, Optional, Sequence, Set
from pydantic import BaseModel, Field, ConfigDict

from .models import Board, Direction, GenerationWarning, GeneratorConfig, PlacedWord
from .normalize import screen_candidates
from .placement import ScratchGrid, try_place_word

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase


class BoardUnsatisfiable(RuntimeError):
    """No board holding every requested word could be built within the retry budget."""

    def __init__(self, message: str, attempts: int = 0, word: Optional[str] = None):
        super().__init__(message)
        self.attempts = attempts
        self.word = word


class BoardGenerator(BaseModel):
    """
    Builds boards from candidate words.

    Randomness comes from an injected `random.Random` so that a fixed seed
    reproduces the same board.

    Attributes:
        config: Grid size and retry budgets
        rng: Random source for directions, anchors and filler letters
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GeneratorConfig = Field(default_factory=GeneratorConfig)
    rng: Optional[random.Random] = None

    def model_post_init(self, __context) -> None:
        """Seed a random source from the config when none was injected."""
        if self.rng is None:
            self.rng = random.Random(self.config.seed)

    def generate(
        self,
        candidate_words: Sequence[str],
        target_count: Optional[int] = None
    ) -> Board:
        """
        Generate a board holding up to target_count of the candidates.

        Args:
            candidate_words: Display names, in the caller's preferred order
            target_count: Words to hide (defaults to config.words_per_board)

        Returns:
            A fully built Board

        Raises:
            BoardUnsatisfiable: If no candidate is usable or placement keeps
                failing for board_attempts attempts
        """
        if target_count is None:
            target_count = self.config.words_per_board
        grid_size = self.config.grid_size

        accepted, warnings = screen_candidates(candidate_words, target_count, grid_size)

        if not accepted:
            raise BoardUnsatisfiable("No candidate word can be placed on this grid")

        if len(accepted) < target_count:
            warnings.append(GenerationWarning(
                code="SHORT_BATCH",
                message=f"Only {len(accepted)} of {target_count} requested words are usable"
            ))
            logger.warning("Only %d of %d requested words are usable", len(accepted), target_count)

        failed_word: Optional[str] = None
        for attempt in range(1, self.config.board_attempts + 1):
            scratch = ScratchGrid(grid_size)
            words, failed_word = self._attempt(scratch, accepted)
            if words is None:
                logger.debug("Attempt %d failed on %s, restarting board", attempt, failed_word)
                continue

            grid = scratch.fill(self.rng, ALPHABET)
            logger.info("Placed %d words on a %dx%d grid in %d attempt(s)",
                        len(words), grid_size, grid_size, attempt)
            return Board(
                grid_size=grid_size,
                grid=grid,
                words=words,
                warnings=warnings,
                attempts=attempt,
            )

        raise BoardUnsatisfiable(
            f"Could not place every word after {self.config.board_attempts} attempts "
            f"(last failure: {failed_word})",
            attempts=self.config.board_attempts,
            word=failed_word,
        )

    def _attempt(self, scratch: ScratchGrid, accepted):
        """One board attempt. Returns (placed words, None) or (None, failing word)."""
        used: Set[Direction] = set()
        placed: List[PlacedWord] = []

        for index, (display_name, normalized) in enumerate(accepted):
            word_id = f"{normalized.lower()}-{index}"
            path = try_place_word(
                scratch, normalized, word_id, used, self.rng, self.config.anchor_attempts
            )
            if path is None:
                return None, normalized

            placed.append(PlacedWord(
                id=word_id,
                display_name=display_name,
                normalized=normalized,
                path=path,
                direction=_path_direction(path),
            ))

        return placed, None


def _path_direction(path) -> Direction:
    return Direction.between(path[0], path[1])


def generate(
    candidate_words: Sequence[str],
    target_count: int,
    grid_size: int,
    rng: Optional[random.Random] = None,
    config: Optional[GeneratorConfig] = None
) -> Board:
    """
    Main generation function: builds a board of grid_size x grid_size.

    Returns a Board with:
    - grid: every cell holding one letter A-Z
    - words: the placed words with id, display name, normalized form, path, direction
    - warnings: skipped candidates and batch shortfalls

    Raises BoardUnsatisfiable if the retry budget is exhausted.
    """
    base = config or GeneratorConfig()
    config = GeneratorConfig(**{**base.model_dump(), "grid_size": grid_size, "words_per_board": target_count})
    return BoardGenerator(config=config, rng=rng).generate(candidate_words, target_count)
