# Path: `src/trackentry/features/entry/__init__.py`
# Summary: Export entry feature domain and diagnostics symbols.
# Why: Provide a stable import surface for callers and tests.

from .diagnostics import log_diagnostic, message_for
from .domain.id_generator import IdGenerator, default_id_generator
from .domain.ordering import OrderingKey, compare_for_ordering, ordering_key
from .domain.outcomes import EntryError, Outcome, Phase, Reporter
from .domain.track_entry import INVALID_RENDERING, TrackEntry

__all__ = [
    "EntryError",
    "INVALID_RENDERING",
    "IdGenerator",
    "OrderingKey",
    "Outcome",
    "Phase",
    "Reporter",
    "TrackEntry",
    "compare_for_ordering",
    "default_id_generator",
    "log_diagnostic",
    "message_for",
    "ordering_key",
]
