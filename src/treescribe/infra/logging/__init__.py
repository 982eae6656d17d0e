from __future__ import annotations

from .config import LoggingConfig, resolve_level
from .core import configure_logging, shutdown_logging

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "resolve_level",
    "shutdown_logging",
]
