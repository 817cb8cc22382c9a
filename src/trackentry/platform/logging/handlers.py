"""Rich console handler for entry diagnostics.

Where: platform/logging/handlers.py
What: Render diagnostic log records with level icons and colours.
Why: Keep console styling out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class DiagnosticRichHandler(RichHandler):
    """Rich handler that renders ``diagnostic_event`` records compactly."""

    _PHASE_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "create": ("❌", "red"),
        "update": ("⚠️", "yellow"),
    }
    _DEFAULT_STYLE: ClassVar[tuple[str, str]] = ("ℹ️", "blue")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def style_for_event(cls, event: str) -> tuple[str, str]:
        """Return the ``(icon, colour)`` pair for an ``entry.<phase>.<error>`` event."""

        parts = event.split(".")
        if len(parts) >= 2 and parts[0] == "entry":
            return cls._PHASE_STYLES.get(parts[1], cls._DEFAULT_STYLE)
        return cls._DEFAULT_STYLE

    def _render_diagnostic_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render entry diagnostics with dedicated styling."""

        event = getattr(record, "diagnostic_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self.style_for_event(event)
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(message, style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for diagnostic events."""

        diagnostic_text = self._render_diagnostic_message(record, message)
        if diagnostic_text is not None:
            return diagnostic_text

        return super().render_message(record, message)


__all__ = ["DiagnosticRichHandler"]
