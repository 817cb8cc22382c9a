"""Configuration facade exports."""

from __future__ import annotations

from .config import DEFAULT_DIAGNOSTIC_LOCALE, SUPPORTED_LOCALES, Config, config
from .paths import default_config_path, default_log_dir

__all__ = [
    "Config",
    "DEFAULT_DIAGNOSTIC_LOCALE",
    "SUPPORTED_LOCALES",
    "config",
    "default_config_path",
    "default_log_dir",
]
