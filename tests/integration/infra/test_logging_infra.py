from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the asynchronous QueueListener architecture, idempotency
of configuration, and log file rotation logic.
"""

import logging
from logging.handlers import QueueListener
from pathlib import Path

import pytest

from treescribe.infra.logging import LoggingConfig, configure_logging, resolve_level, shutdown_logging
from treescribe.infra.logging.core import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR
from treescribe.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Detach TreeScribe handlers before and after each test."""
    root = logging.getLogger()

    def _clean() -> None:
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener and isinstance(listener, QueueListener) and getattr(listener, "_thread", None):
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _clean()
    yield
    _clean()


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """Repeated configuration does not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial_handler_count = len(_our_handlers())

    configure_logging(cfg)
    assert len(_our_handlers()) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigures_once() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert len(_our_handlers()) == 1
    assert logging.getLogger().level == logging.DEBUG


def test_log_rotation(tmp_path: Path) -> None:
    """File rotation kicks in when the size limit is exceeded."""
    log_file = tmp_path / "logs" / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Stopping the listener drains the queue
    shutdown_logging()

    backup_file = tmp_path / "logs" / "test_rotate.log.1"
    assert log_file.exists()
    assert backup_file.exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """The root logger routes records through a tagged QueueHandler."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert len(_our_handlers()) > 0
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_unknown_level_falls_back_to_info() -> None:
    configure_logging(LoggingConfig(level="verbose"))
    assert logging.getLogger().level == logging.INFO


def test_shutdown_detaches_handlers() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    shutdown_logging()

    assert _our_handlers() == []
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is None


def test_config_from_settings(tmp_path: Path) -> None:
    log_file = str(tmp_path / "treescribe.log")
    cfg = LoggingConfig.from_settings({"log_level": " debug "}, log_file=log_file)

    assert cfg.level == "DEBUG"
    assert cfg.level_int == logging.DEBUG
    assert cfg.log_file == log_file
    assert cfg.console is True


def test_config_from_settings_without_level() -> None:
    cfg = LoggingConfig.from_settings({})
    assert cfg.level_int == logging.INFO
    assert cfg.log_file is None


@pytest.mark.parametrize("name, expected", [
    ("warn", logging.WARNING),
    ("ERROR", logging.ERROR),
    ("", logging.INFO),
    (None, logging.INFO),
    ("loud", logging.INFO),
])
def test_resolve_level(name, expected) -> None:
    assert resolve_level(name) == expected
