"""Where: src/trackentry/features/entry/domain/id_generator.py
What: Thread-safe monotonically increasing id source for track entries.
Why: Entry ids must stay unique even when entries are built from several threads.
"""

from __future__ import annotations

import threading
from typing import Final


class IdGenerator:
    """Hand out consecutive integer ids starting at ``start``."""

    def __init__(self, start: int = 1) -> None:
        self._next: int = start
        self._lock: Final[threading.Lock] = threading.Lock()

    def next_id(self) -> int:
        """Consume and return the next id."""

        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Return the id the next call to ``next_id`` will hand out."""

        with self._lock:
            return self._next


# Process-wide counter shared by every entry that is not given its own generator.
_DEFAULT_ID_GENERATOR: Final[IdGenerator] = IdGenerator()


def default_id_generator() -> IdGenerator:
    """Return the process-wide id generator."""

    return _DEFAULT_ID_GENERATOR


__all__ = ["IdGenerator", "default_id_generator"]
