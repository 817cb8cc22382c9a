"""String normalization helpers shared by entry validation and matching."""

from __future__ import annotations


def trim(value: str) -> str:
    """Strip leading and trailing whitespace."""

    return value.strip()


def fold(value: str) -> str:
    """Normalize case for case-insensitive comparison."""

    return value.lower()


def contains_folded(haystack: str, folded_needle: str) -> bool:
    """Return whether ``folded_needle`` occurs in ``haystack`` ignoring case."""

    return folded_needle in fold(haystack)


__all__ = ["contains_folded", "fold", "trim"]
