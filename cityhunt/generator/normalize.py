"""Word normalization and candidate screening."""

import logging
import random
import re
import unicodedata
from typing import List, Optional, Sequence, Tuple

from .models import GenerationWarning

logger = logging.getLogger(__name__)


def normalize_word(name: str) -> str:
    """Reduce a display name to its uppercase A-Z letters."""
    # Fold accents first so "Kraków" keeps its O
    decomposed = unicodedata.normalize('NFKD', name)
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return re.sub(r'[^A-Za-z]', '', stripped).upper()


def screen_candidates(
    names: Sequence[str],
    target_count: int,
    grid_size: int
) -> Tuple[List[Tuple[str, str]], List[GenerationWarning]]:
    """
    Pick up to target_count placeable words from the candidates, in order.

    Words that are empty or a single letter after normalization, or longer
    than the grid side, are skipped with a warning instead of failing the
    board.

    Returns a tuple of ((display_name, normalized) pairs, warnings).
    """
    accepted: List[Tuple[str, str]] = []
    warnings: List[GenerationWarning] = []

    for name in names:
        if len(accepted) >= target_count:
            break

        normalized = normalize_word(name)

        if not normalized:
            warnings.append(GenerationWarning(
                code="EMPTY_WORD",
                message=f"'{name}' has no letters after normalization",
                word=name
            ))
            logger.warning("Skipping %r: no letters after normalization", name)
            continue

        # A one-letter selection is always too short to claim a word
        if len(normalized) < 2:
            warnings.append(GenerationWarning(
                code="WORD_TOO_SHORT",
                message=f"'{name}' has fewer than 2 letters",
                word=name
            ))
            logger.warning("Skipping %r: fewer than 2 letters", name)
            continue

        if len(normalized) > grid_size:
            warnings.append(GenerationWarning(
                code="WORD_TOO_LONG",
                message=f"'{name}' ({len(normalized)} letters) does not fit a {grid_size}x{grid_size} grid",
                word=name
            ))
            logger.warning("Skipping %r: %d letters exceeds grid size %d", name, len(normalized), grid_size)
            continue

        accepted.append((name, normalized))

    return accepted, warnings


def pick_batch(
    names: Sequence[str],
    rng: random.Random,
    count: Optional[int] = None
) -> List[str]:
    """Shuffle a copy of the source names and take the first `count` (all by default)."""
    pool = list(names)
    rng.shuffle(pool)
    return pool if count is None else pool[:count]
