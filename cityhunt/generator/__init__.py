"""Board generation for city hunt."""

from .generate import generate, BoardGenerator, BoardUnsatisfiable
from .models import Cell, Direction, DIRECTIONS, PlacedWord, Board, GenerationWarning, GeneratorConfig
from .normalize import normalize_word, screen_candidates, pick_batch
from .grid import read_path, is_straight_path, check_board, render_grid, solution_cells
from .data import EUROPEAN_CITIES

__all__ = [
    # Main generation
    "generate",
    "BoardGenerator",
    "BoardUnsatisfiable",
    # Models
    "Cell",
    "Direction",
    "DIRECTIONS",
    "PlacedWord",
    "Board",
    "GenerationWarning",
    "GeneratorConfig",
    # Normalization
    "normalize_word",
    "screen_candidates",
    "pick_batch",
    # Grid utilities
    "read_path",
    "is_straight_path",
    "check_board",
    "render_grid",
    "solution_cells",
    # Word source
    "EUROPEAN_CITIES",
]
