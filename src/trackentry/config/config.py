"""Configuration management for trackentry."""

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from trackentry.config.file_ops import write_text_file
from trackentry.config.paths import default_config_path, default_log_dir
from trackentry.platform.logging import configure_from, logger

DEFAULT_DIAGNOSTIC_LOCALE: Final[str] = "zh"
SUPPORTED_LOCALES: Final[tuple[str, ...]] = ("zh", "en")
DEFAULT_CONSOLE_LEVEL: Final[str] = "INFO"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    # Minimum level shown on the console
    console_level: str = DEFAULT_CONSOLE_LEVEL

    # Language used for entry diagnostics
    diagnostic_locale: str = DEFAULT_DIAGNOSTIC_LOCALE

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Normalize raw values read from TOML.

        String paths flagged with ``metadata={"path": True}`` become ``Path``
        objects, and unknown levels or locales fall back to their defaults.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        level = str(self.console_level).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.warning(
                "Unknown console_level '%s', using %s", self.console_level, DEFAULT_CONSOLE_LEVEL
            )
            level = DEFAULT_CONSOLE_LEVEL
        self.console_level = level

        locale = str(self.diagnostic_locale).strip().lower()
        if locale not in SUPPORTED_LOCALES:
            logger.warning(
                "Unsupported diagnostic_locale '%s', using %s",
                self.diagnostic_locale,
                DEFAULT_DIAGNOSTIC_LOCALE,
            )
            locale = DEFAULT_DIAGNOSTIC_LOCALE
        self.diagnostic_locale = locale

    @property
    def resolved_log_file(self) -> Path | None:
        """Return the log file path, anchoring relative paths in the log directory."""

        if self.log_file is None:
            return None
        log_file = self.log_file.expanduser()
        if not log_file.is_absolute():
            log_file = default_log_dir() / log_file
        return log_file.resolve()

    @property
    def console_level_number(self) -> int:
        """Return the numeric logging level for ``console_level``."""

        return logging.getLevelName(self.console_level)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# trackentry Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Leave unset to log to the console only")
        lines.append('# Example: log_file = "/path/to/logs/trackentry.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level: DEBUG, INFO, WARNING or ERROR")
        lines.append(f"console_level = {self._format_toml_value(config['console_level'])}")
        lines.append("")

        lines.append("# Language of entry diagnostics: " + ", ".join(SUPPORTED_LOCALES))
        lines.append(
            f"diagnostic_locale = {self._format_toml_value(config['diagnostic_locale'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults without writing anything.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
            OSError: If the file exists but cannot be read.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()

            cls._instance = instance
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
configure_from(config)
