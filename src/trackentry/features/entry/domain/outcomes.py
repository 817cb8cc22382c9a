"""Where: src/trackentry/features/entry/domain/outcomes.py
What: Error kinds and bool-compatible outcomes returned by entry operations.
Why: Let callers branch on what failed without parsing console messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class EntryError(str, Enum):
    """Validation failures an entry operation can report."""

    EMPTY_TITLE = "empty_title"
    EMPTY_ARTIST = "empty_artist"
    NON_POSITIVE_DURATION = "non_positive_duration"
    RATING_OUT_OF_RANGE = "rating_out_of_range"
    EMPTY_TAG = "empty_tag"
    DUPLICATE_TAG = "duplicate_tag"
    TAG_NOT_FOUND = "tag_not_found"
    ENTRY_INVALID = "entry_invalid"


class Phase(str, Enum):
    """Whether a failure happened while constructing or updating an entry."""

    CREATE = "create"
    UPDATE = "update"


@dataclass(slots=True, frozen=True)
class Outcome:
    """Result of a mutating entry operation.

    Truthiness follows ``ok`` so the outcome can stand in for a plain bool.
    """

    ok: bool
    error: EntryError | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> "Outcome":
        return _SUCCESS

    @classmethod
    def failure(cls, error: EntryError) -> "Outcome":
        return cls(ok=False, error=error)


_SUCCESS = Outcome(ok=True)


class Reporter(Protocol):
    """Receives every validation failure raised by an entry."""

    def __call__(self, error: EntryError, phase: Phase) -> None: ...


__all__ = ["EntryError", "Outcome", "Phase", "Reporter"]
