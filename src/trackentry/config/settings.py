"""Where: src/trackentry/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the entry feature without file I/O.
"""

from __future__ import annotations

from typing import Final

from trackentry.config.config import config as app_config

# Rating bounds ---------------------------------------------------------------

RATING_MIN: Final[int] = 1
RATING_MAX: Final[int] = 5


# Rendering -------------------------------------------------------------------

# One symbol is drawn per rating point.
RATING_SYMBOL: Final[str] = "*"
TAG_SEPARATOR: Final[str] = ", "


# Diagnostics -----------------------------------------------------------------

# Already validated by Config.__post_init__.
DIAGNOSTIC_LOCALE: str = app_config.diagnostic_locale


__all__ = [
    "RATING_MIN",
    "RATING_MAX",
    "RATING_SYMBOL",
    "TAG_SEPARATOR",
    "DIAGNOSTIC_LOCALE",
]
