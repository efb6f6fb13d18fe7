"""Configuration management for Agenda."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.frequency import Frequency

logger = logging.getLogger(__name__)

AGENDA_HOME = Path(os.environ.get("AGENDA_HOME", Path.home() / "agenda"))
CONFIG_FILE = AGENDA_HOME / "config" / "agenda.conf"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Agenda configuration."""

    default_duration_minutes: int = 60
    default_frequency: str = "weeks"
    lookahead_days: int = 30
    log_level: str = "WARNING"

    @property
    def frequency(self) -> Frequency:
        return Frequency.parse(self.default_frequency)


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_positive_int(key: str, value: str, default: int) -> int:
    try:
        number = int(value)
    except ValueError:
        logger.warning(f"Invalid {key.upper()} value {value!r}, using {default}")
        return default
    if number <= 0:
        logger.warning(f"{key.upper()} must be positive, got {number}; using {default}")
        return default
    return number


def load_config(path: Path | None = None) -> Config:
    """Load configuration from agenda.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "default_duration_minutes":
                config.default_duration_minutes = _parse_positive_int(
                    key, value, config.default_duration_minutes
                )
            case "default_frequency":
                try:
                    config.default_frequency = Frequency.parse(value).value
                except ValueError as e:
                    logger.warning(f"Invalid DEFAULT_FREQUENCY: {e}")
            case "lookahead_days":
                config.lookahead_days = _parse_positive_int(key, value, config.lookahead_days)
            case "log_level":
                if value.upper() in LOG_LEVELS:
                    config.log_level = value.upper()
                else:
                    logger.warning(f"Invalid LOG_LEVEL {value!r}, using {config.log_level}")
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
