from __future__ import annotations

"""
Logging Configuration Models.

Translates the 'app_settings' block of config.json into the immutable
settings consumed by the logging core, and resolves textual severity
names (as typed by users in config.json) to logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

# Accepted spellings of the 'log_level' setting
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_LEVEL = "INFO"


def resolve_level(name: Optional[str]) -> int:
    """Map a level name to its numeric constant; unknown names mean INFO."""
    if not name:
        return logging.INFO
    return _LEVEL_MAP.get(str(name).strip().upper(), logging.INFO)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings of the logging subsystem for one TreeScribe session.

    Attributes:
        level: Minimum severity name, e.g. "DEBUG".
        console: Mirror records to stderr.
        log_file: Rotating log file path; None disables file output.
        max_bytes: Size of one log segment before rollover.
        backup_count: Rolled-over segments kept next to the active file.
    """
    level: str = DEFAULT_LEVEL
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(name)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @property
    def level_int(self) -> int:
        return resolve_level(self.level)

    @classmethod
    def from_settings(cls, settings: Dict[str, Any], log_file: Optional[str] = None) -> "LoggingConfig":
        """
        Build the session config from the persisted application settings.

        Args:
            settings: The 'app_settings' block (see domain.config).
            log_file: Target of the rotating file handler, if any.
        """
        level = settings.get("log_level") or DEFAULT_LEVEL
        return cls(level=str(level).strip().upper(), log_file=log_file)
