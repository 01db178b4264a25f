"""Configuration management for taskboard."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TASKBOARD_HOME = Path(os.environ.get("TASKBOARD_HOME", Path.home() / "taskboard"))
CONFIG_FILE = TASKBOARD_HOME / "config" / "taskboard.conf"


class ConfigurationError(Exception):
    """Raised when no usable task store is configured."""

    pass


@dataclass
class Config:
    """taskboard configuration."""

    supabase_url: str = ""
    supabase_key: str = ""
    data_file: str = ""
    bucket_scheme: str = "detailed"
    time_window: str = "All Time"
    notify_interval_minutes: int = 30


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from taskboard.conf; defaults if the file is missing."""
    config = Config()
    config_file = path or CONFIG_FILE

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "supabase_url":
                config.supabase_url = value.rstrip("/")
            case "supabase_key":
                config.supabase_key = value
            case "data_file":
                config.data_file = value
            case "bucket_scheme":
                config.bucket_scheme = value.lower()
            case "time_window":
                config.time_window = value
            case "notify_interval_minutes":
                try:
                    config.notify_interval_minutes = int(value)
                except ValueError:
                    logger.warning(f"Invalid NOTIFY_INTERVAL_MINUTES {value!r}, keeping default")

    return config
