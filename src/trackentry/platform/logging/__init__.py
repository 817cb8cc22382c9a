"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helpers, and the Rich handler.
Why: Provide a single canonical import path for the application logger.
"""

from __future__ import annotations

from .config import LOGGER_NAME, configure_from, logger, setup_logger
from .handlers import DiagnosticRichHandler

__all__ = [
    "DiagnosticRichHandler",
    "LOGGER_NAME",
    "configure_from",
    "logger",
    "setup_logger",
]
