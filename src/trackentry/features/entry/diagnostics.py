"""Where: src/trackentry/features/entry/diagnostics.py
What: Translate entry error kinds into localized console diagnostics.
Why: Entry validation only reports what failed; wording and output live here.
"""

from __future__ import annotations

import logging
from typing import Final

from trackentry.config import settings
from trackentry.platform.logging import logger

from .domain.outcomes import EntryError, Phase

_RANGE: Final[str] = f"{settings.RATING_MIN}..{settings.RATING_MAX}"

MESSAGES: Final[dict[str, dict[tuple[EntryError, Phase], str]]] = {
    "zh": {
        (EntryError.EMPTY_TITLE, Phase.CREATE): "[错误] 标题不能为空",
        (EntryError.EMPTY_ARTIST, Phase.CREATE): "[错误] 艺人不能为空",
        (EntryError.NON_POSITIVE_DURATION, Phase.CREATE): "[错误] 时长必须为正整数（秒）",
        (EntryError.RATING_OUT_OF_RANGE, Phase.CREATE): (
            f"[错误] 评分必须在 {settings.RATING_MIN}...{settings.RATING_MAX} 之间"
        ),
        (EntryError.EMPTY_TITLE, Phase.UPDATE): "[提示] 标题不能为空，已忽略本次修改",
        (EntryError.EMPTY_ARTIST, Phase.UPDATE): "[提示] 艺人不能为空，已忽略本次修改",
        (EntryError.NON_POSITIVE_DURATION, Phase.UPDATE): "[提示] 时长需为正整数，已忽略本次修改",
        (EntryError.RATING_OUT_OF_RANGE, Phase.UPDATE): f"[提示] 评分需在 {_RANGE}，已忽略本次修改",
        (EntryError.EMPTY_TAG, Phase.UPDATE): "[提示] 空标签已忽略",
        (EntryError.DUPLICATE_TAG, Phase.UPDATE): "[提示] 标签已存在（忽略大小写）",
        (EntryError.TAG_NOT_FOUND, Phase.UPDATE): "[提示] 未找到该标签",
        (EntryError.ENTRY_INVALID, Phase.UPDATE): "[提示] 条目无效，已忽略本次操作",
    },
    "en": {
        (EntryError.EMPTY_TITLE, Phase.CREATE): "Error: title must not be empty",
        (EntryError.EMPTY_ARTIST, Phase.CREATE): "Error: artist must not be empty",
        (EntryError.NON_POSITIVE_DURATION, Phase.CREATE): (
            "Error: duration must be a positive number of seconds"
        ),
        (EntryError.RATING_OUT_OF_RANGE, Phase.CREATE): (
            f"Error: rating must be between {settings.RATING_MIN} and {settings.RATING_MAX}"
        ),
        (EntryError.EMPTY_TITLE, Phase.UPDATE): "Note: title must not be empty, change ignored",
        (EntryError.EMPTY_ARTIST, Phase.UPDATE): "Note: artist must not be empty, change ignored",
        (EntryError.NON_POSITIVE_DURATION, Phase.UPDATE): (
            "Note: duration must be a positive integer, change ignored"
        ),
        (EntryError.RATING_OUT_OF_RANGE, Phase.UPDATE): (
            f"Note: rating must be in {_RANGE}, change ignored"
        ),
        (EntryError.EMPTY_TAG, Phase.UPDATE): "Note: empty tag ignored",
        (EntryError.DUPLICATE_TAG, Phase.UPDATE): "Note: tag already exists (case-insensitive)",
        (EntryError.TAG_NOT_FOUND, Phase.UPDATE): "Note: tag not found",
        (EntryError.ENTRY_INVALID, Phase.UPDATE): "Note: entry is invalid, operation ignored",
    },
}


def message_for(error: EntryError, phase: Phase, locale: str | None = None) -> str:
    """Return the diagnostic text for ``error`` raised during ``phase``.

    Args:
        error: Failure kind reported by the entry.
        phase: Whether the entry was being constructed or updated.
        locale: Catalog to use. Defaults to the configured diagnostic locale.

    Returns:
        str: Human-readable message. Phases without a dedicated message fall
        back to the update wording.
    """
    catalog = MESSAGES.get(locale or settings.DIAGNOSTIC_LOCALE, MESSAGES["zh"])
    message = catalog.get((error, phase))
    if message is None:
        message = catalog[(error, Phase.UPDATE)]
    return message


def level_for(phase: Phase) -> int:
    """Construction failures are errors; rejected updates are warnings."""

    return logging.ERROR if phase is Phase.CREATE else logging.WARNING


def log_diagnostic(error: EntryError, phase: Phase) -> None:
    """Default reporter: emit the localized message through the app logger."""

    logger.log(
        level_for(phase),
        "%s",
        message_for(error, phase),
        extra={"diagnostic_event": f"entry.{phase.value}.{error.value}"},
    )


__all__ = ["MESSAGES", "level_for", "log_diagnostic", "message_for"]
