"""Validated music track entries."""

from trackentry.features.entry import (
    EntryError,
    IdGenerator,
    Outcome,
    Phase,
    TrackEntry,
    compare_for_ordering,
    ordering_key,
)

__all__ = [
    "EntryError",
    "IdGenerator",
    "Outcome",
    "Phase",
    "TrackEntry",
    "compare_for_ordering",
    "ordering_key",
]
