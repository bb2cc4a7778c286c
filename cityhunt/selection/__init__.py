"""Gesture selection for city hunt."""

from .models import Verdict, VerdictKind, TrackerState
from .tracker import SelectionTracker

__all__ = [
    "Verdict",
    "VerdictKind",
    "TrackerState",
    "SelectionTracker",
]
