"""Tests for the ``DiagnosticRichHandler`` and logger bootstrap."""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import subprocess
import sys
import textwrap
from io import StringIO
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from rich.text import Text

from trackentry.config.config import Config
from trackentry.platform.logging import DiagnosticRichHandler, configure_from, setup_logger


@pytest.fixture
def portable_log_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point repository-root detection at a temporary directory."""

    import trackentry.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path


def _make_handler(buffer: StringIO | None = None) -> DiagnosticRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=buffer or StringIO(), soft_wrap=True)
    return DiagnosticRichHandler(console=console)


def _build_record(msg: str = "", level: int = logging.INFO, **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with extras for testing."""

    record = logging.LogRecord(
        name="trackentry",
        level=level,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_construction_failures_render_as_errors() -> None:
    handler = _make_handler()
    record = _build_record(diagnostic_event="entry.create.empty_title")

    rendered = handler.render_message(record, "[错误] 标题不能为空")

    assert isinstance(rendered, Text)
    assert rendered.plain == "❌ [错误] 标题不能为空"


def test_update_rejections_render_as_warnings() -> None:
    handler = _make_handler()
    record = _build_record(diagnostic_event="entry.update.duplicate_tag")

    rendered = handler.render_message(record, "Note: tag already exists")

    assert isinstance(rendered, Text)
    assert rendered.plain.startswith("⚠️ ")


def test_unknown_events_use_default_style() -> None:
    assert DiagnosticRichHandler.style_for_event("other.thing") == ("ℹ️", "blue")
    assert DiagnosticRichHandler.style_for_event("entry.delete.x") == ("ℹ️", "blue")


def test_plain_records_fall_back_to_rich_rendering() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(), "Configuration saved to /tmp/x")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Configuration saved to /tmp/x"


def test_brackets_are_not_treated_as_markup() -> None:
    buffer = StringIO()
    handler = _make_handler(buffer)

    handler.emit(_build_record("[error] literal", logging.ERROR))

    assert "[error] literal" in buffer.getvalue()


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "trackentry.log"
    logger = setup_logger(log_file=log_file)
    try:
        logger.warning("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
        assert "written to file" in log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()


def test_configure_from_applies_console_level() -> None:
    logger = configure_from(Config(console_level="ERROR"))
    try:
        console_handlers = [h for h in logger.handlers if isinstance(h, DiagnosticRichHandler)]
        assert len(console_handlers) == 1
        assert console_handlers[0].level == logging.ERROR
    finally:
        _ = setup_logger()


def test_configure_from_writes_relative_log_file_under_log_dir(portable_log_root: Path) -> None:
    logger = configure_from(Config(log_file="app.log"))
    try:
        logger.warning("relative target")
        for handler in logger.handlers:
            handler.flush()

        assert "relative target" in (portable_log_root / "logs" / "app.log").read_text(encoding="utf-8")
    finally:
        _ = setup_logger()


def test_package_import_applies_configured_logging(tmp_path: Path) -> None:
    """Importing the package applies console_level and log_file from the config file."""

    log_file = tmp_path / "logs" / "trackentry.log"
    config_file = tmp_path / "config.toml"
    _ = config_file.write_text(
        f'console_level = "ERROR"\nlog_file = "{log_file.as_posix()}"\ndiagnostic_locale = "en"\n',
        encoding="utf-8",
    )
    script = textwrap.dedent(
        """
        import json

        from trackentry import TrackEntry
        from trackentry.platform.logging import DiagnosticRichHandler, logger

        TrackEntry("Song", "Artist", 10, 3).add_tag("   ")
        for handler in logger.handlers:
            handler.flush()
        levels = [h.level for h in logger.handlers if isinstance(h, DiagnosticRichHandler)]
        print(json.dumps(levels))
        """
    )
    env = {**os.environ, "TRACKENTRY_CONFIG_PATH": str(config_file)}

    result = subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        check=True,
    )

    assert json.loads(result.stdout.strip().splitlines()[-1]) == [logging.ERROR]
    assert "empty tag ignored" not in result.stdout
    assert log_file.exists()
    assert "empty tag ignored" in log_file.read_text(encoding="utf-8")
