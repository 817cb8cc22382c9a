"""Shared test fixtures and utilities."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from trackentry.features.entry import EntryError, IdGenerator, Phase, TrackEntry


class RecordingReporter:
    """Reporter that keeps every diagnostic instead of printing it."""

    def __init__(self) -> None:
        self.calls: list[tuple[EntryError, Phase]] = []

    def __call__(self, error: EntryError, phase: Phase) -> None:
        self.calls.append((error, phase))

    @property
    def errors(self) -> list[EntryError]:
        return [error for error, _ in self.calls]


@pytest.fixture
def id_generator() -> IdGenerator:
    """Fresh id space starting at 1."""
    return IdGenerator()


@pytest.fixture
def reporter() -> RecordingReporter:
    """Fresh RecordingReporter instance."""
    return RecordingReporter()


@pytest.fixture
def make_entry(
    id_generator: IdGenerator, reporter: RecordingReporter
) -> Callable[..., TrackEntry]:
    """Build entries wired to the test id generator and reporter."""

    def _make(
        title: str = "Song",
        artist: str = "Artist",
        duration_seconds: int = 180,
        rating: int = 3,
    ) -> TrackEntry:
        return TrackEntry(
            title,
            artist,
            duration_seconds,
            rating,
            id_generator=id_generator,
            reporter=reporter,
        )

    return _make
