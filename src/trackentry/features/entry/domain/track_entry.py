"""Where: src/trackentry/features/entry/domain/track_entry.py
What: Validated music track entry with tag management, matching and rendering.
Why: Keep every invariant of a track record inside one value object.
"""

from __future__ import annotations

from types import NotImplementedType
from typing import Final

from trackentry.config import settings

from ..diagnostics import log_diagnostic
from .id_generator import IdGenerator, default_id_generator
from .ordering import ordering_key
from .outcomes import EntryError, Outcome, Phase, Reporter
from .text import contains_folded, fold, trim

INVALID_RENDERING: Final[str] = "[#-] <invalid entry>"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _duration_is_valid(value: int) -> bool:
    return _is_int(value) and value > 0


def _rating_in_range(value: int) -> bool:
    return _is_int(value) and settings.RATING_MIN <= value <= settings.RATING_MAX


class TrackEntry:
    """One song record: title, artist, duration, rating and tags.

    Construction validates its inputs in a fixed order (title, artist,
    duration, rating) and reports only the first violation. A failed
    construction yields an entry with ``valid`` False and no id, and does
    not consume an id from the generator. Use :meth:`create` to get ``None``
    instead of an invalid entry.

    Every mutator returns an :class:`Outcome` that is truthy on success.
    Rejected input is reported through ``reporter`` and leaves the entry
    unchanged.
    """

    def __init__(
        self,
        title: str,
        artist: str,
        duration_seconds: int,
        rating: int,
        *,
        id_generator: IdGenerator | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._reporter: Reporter = reporter or log_diagnostic
        self._id: int | None = None
        self._title: str = ""
        self._artist: str = ""
        self._duration_seconds: int = 0
        self._rating: int = 0
        self._tags: list[str] = []
        self._valid: bool = False
        self._construction_error: EntryError | None = None

        clean_title = trim(title)
        clean_artist = trim(artist)

        error: EntryError | None = None
        if not clean_title:
            error = EntryError.EMPTY_TITLE
        elif not clean_artist:
            error = EntryError.EMPTY_ARTIST
        elif not _duration_is_valid(duration_seconds):
            error = EntryError.NON_POSITIVE_DURATION
        elif not _rating_in_range(rating):
            error = EntryError.RATING_OUT_OF_RANGE

        if error is not None:
            self._construction_error = error
            self._reporter(error, Phase.CREATE)
            return

        self._id = (id_generator or default_id_generator()).next_id()
        self._title = clean_title
        self._artist = clean_artist
        self._duration_seconds = duration_seconds
        self._rating = rating
        self._valid = True

    @classmethod
    def create(
        cls,
        title: str,
        artist: str,
        duration_seconds: int,
        rating: int,
        *,
        id_generator: IdGenerator | None = None,
        reporter: Reporter | None = None,
    ) -> "TrackEntry | None":
        """Build an entry, returning ``None`` when validation fails."""

        entry = cls(
            title,
            artist,
            duration_seconds,
            rating,
            id_generator=id_generator,
            reporter=reporter,
        )
        return entry if entry.valid else None

    # Read-only views ---------------------------------------------------------

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def artist(self) -> str:
        return self._artist

    @property
    def duration_seconds(self) -> int:
        return self._duration_seconds

    @property
    def rating(self) -> int:
        return self._rating

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._tags)

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def construction_error(self) -> EntryError | None:
        """Why construction failed, or None for a valid entry."""
        return self._construction_error

    # Mutators ----------------------------------------------------------------

    def _reject(self, error: EntryError) -> Outcome:
        self._reporter(error, Phase.UPDATE)
        return Outcome.failure(error)

    def set_title(self, text: str) -> Outcome:
        if not self._valid:
            return self._reject(EntryError.ENTRY_INVALID)
        clean_title = trim(text)
        if not clean_title:
            return self._reject(EntryError.EMPTY_TITLE)
        self._title = clean_title
        return Outcome.success()

    def set_artist(self, text: str) -> Outcome:
        if not self._valid:
            return self._reject(EntryError.ENTRY_INVALID)
        clean_artist = trim(text)
        if not clean_artist:
            return self._reject(EntryError.EMPTY_ARTIST)
        self._artist = clean_artist
        return Outcome.success()

    def set_duration(self, seconds: int) -> Outcome:
        if not self._valid:
            return self._reject(EntryError.ENTRY_INVALID)
        if not _duration_is_valid(seconds):
            return self._reject(EntryError.NON_POSITIVE_DURATION)
        self._duration_seconds = seconds
        return Outcome.success()

    def set_rating(self, value: int) -> Outcome:
        if not self._valid:
            return self._reject(EntryError.ENTRY_INVALID)
        if not _rating_in_range(value):
            return self._reject(EntryError.RATING_OUT_OF_RANGE)
        self._rating = value
        return Outcome.success()

    def add_tag(self, tag: str) -> Outcome:
        """Append ``tag`` unless it is blank or already present ignoring case."""

        if not self._valid:
            return self._reject(EntryError.ENTRY_INVALID)
        clean_tag = trim(tag)
        if not clean_tag:
            return self._reject(EntryError.EMPTY_TAG)

        folded = fold(clean_tag)
        if any(fold(existing) == folded for existing in self._tags):
            return self._reject(EntryError.DUPLICATE_TAG)

        self._tags.append(clean_tag)
        return Outcome.success()

    def remove_tag(self, tag: str) -> Outcome:
        """Remove the first tag equal to ``tag`` ignoring case."""

        if not self._valid:
            return self._reject(EntryError.ENTRY_INVALID)
        folded = fold(trim(tag))
        for index, existing in enumerate(self._tags):
            if fold(existing) == folded:
                del self._tags[index]
                return Outcome.success()
        return self._reject(EntryError.TAG_NOT_FOUND)

    # Queries -----------------------------------------------------------------

    def matches_keyword(self, keyword: str) -> bool:
        """Return whether the keyword occurs in the title, artist or any tag.

        Matching is a case-insensitive substring search. A blank keyword
        never matches.
        """
        clean_keyword = trim(keyword)
        if not clean_keyword or not self._valid:
            return False

        folded = fold(clean_keyword)
        if contains_folded(self._title, folded):
            return True
        if contains_folded(self._artist, folded):
            return True
        return any(contains_folded(tag, folded) for tag in self._tags)

    def render(self) -> str:
        """Return the one-line summary, e.g. ``[#3] A - B (61s) **  [tags: x, y]``."""

        if not self._valid:
            return INVALID_RENDERING

        stars = settings.RATING_SYMBOL * self._rating
        line = f"[#{self._id}] {self._artist} - {self._title} ({self._duration_seconds}s) {stars}"
        if self._tags:
            line += f"  [tags: {settings.TAG_SEPARATOR.join(self._tags)}]"
        return line

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if not self._valid:
            return f"TrackEntry(valid=False, error={self._construction_error})"
        return (
            f"TrackEntry(id={self._id}, title={self._title!r}, artist={self._artist!r}, "
            f"duration_seconds={self._duration_seconds}, rating={self._rating}, "
            f"tags={self._tags!r})"
        )

    def __lt__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, TrackEntry):
            return NotImplemented
        return ordering_key(self) < ordering_key(other)


__all__ = ["INVALID_RENDERING", "TrackEntry"]
