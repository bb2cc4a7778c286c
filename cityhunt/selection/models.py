"""Pydantic models for the selection layer."""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field

from ..generator.models import Cell, PlacedWord


# Type aliases
TrackerState = Literal["idle", "dragging"]
VerdictKind = Literal["too_short", "match", "miss"]


class Verdict(BaseModel):
    """Outcome of ending a gesture."""
    kind: VerdictKind
    word: Optional[PlacedWord] = None  # The matched word, for kind == "match"
    attempted: str = ""  # Letters selected, in drag order
    path: List[Cell] = Field(default_factory=list)

    @classmethod
    def too_short(cls, attempted: str = "", path: Optional[List[Cell]] = None) -> "Verdict":
        return cls(kind="too_short", attempted=attempted, path=path or [])

    @classmethod
    def match(cls, word: PlacedWord, attempted: str = "", path: Optional[List[Cell]] = None) -> "Verdict":
        return cls(kind="match", word=word, attempted=attempted, path=path or [])

    @classmethod
    def miss(cls, attempted: str, path: Optional[List[Cell]] = None) -> "Verdict":
        return cls(kind="miss", attempted=attempted, path=path or [])

    @property
    def is_match(self) -> bool:
        """Whether this verdict claimed a word."""
        return self.kind == "match"
