"""Where: src/trackentry/features/entry/domain/ordering.py
What: Sort order for track entries.
Why: Collections sort entries by rating, then title, then id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .track_entry import TrackEntry

OrderingKey = tuple[int, int, str, int]


def ordering_key(entry: "TrackEntry") -> OrderingKey:
    """Return a key for ``sorted``: rating descending, title and id ascending.

    Invalid entries sort after every valid one.
    """
    return (
        0 if entry.valid else 1,
        -entry.rating,
        entry.title,
        entry.id if entry.id is not None else 0,
    )


def compare_for_ordering(a: "TrackEntry", b: "TrackEntry") -> int:
    """Three-way comparison: negative when ``a`` sorts before ``b``."""

    key_a = ordering_key(a)
    key_b = ordering_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


__all__ = ["OrderingKey", "compare_for_ordering", "ordering_key"]
