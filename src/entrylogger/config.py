"""Configuration management for entrylogger."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .adapters.file_store import FileStoreConfig

logger = logging.getLogger(__name__)

ENTRYLOGGER_HOME = Path(os.environ.get("ENTRYLOGGER_HOME", Path.home() / "entrylogger"))
CONFIG_FILE = ENTRYLOGGER_HOME / "config" / "entrylogger.conf"
DATA_DIR = ENTRYLOGGER_HOME / "data"

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class Config:
    """entrylogger configuration."""

    file_name: str = "entries"
    file_path: str = str(DATA_DIR)
    current_extension: str = ".txt"
    backup_extension: str = ".bak"
    # Reject invalid entries before writing instead of warning
    strict_validation: bool = False

    def store_config(self) -> FileStoreConfig:
        """Explicit file location for the persistence engine."""
        return FileStoreConfig(
            file_name=self.file_name,
            file_path=self.file_path,
            current_extension=self.current_extension,
            backup_extension=self.backup_extension,
        )


def _strip_value(value: str) -> str:
    """Remove surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from entrylogger.conf (or the given file)."""
    config = Config()
    config_file = Path(path).expanduser() if path else CONFIG_FILE

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return config

    for line in config_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "file_name":
                config.file_name = value
            case "file_path":
                config.file_path = value
            case "current_extension":
                config.current_extension = value
            case "backup_extension":
                config.backup_extension = value
            case "strict_validation":
                if value.lower() in TRUE_VALUES:
                    config.strict_validation = True
                elif value.lower() in FALSE_VALUES:
                    config.strict_validation = False
                else:
                    logger.warning(f"Invalid STRICT_VALIDATION value: {value}")
            case _:
                logger.warning(f"Unknown config key: {key}")

    return config
