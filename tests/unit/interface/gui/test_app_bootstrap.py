from __future__ import annotations

"""
Unit tests for the GUI bootstrap.

Runs the startup sequence with the window, workspace and persistence
replaced by mocks, then fires the window-close handler.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("customtkinter")

import treescribe  # noqa: E402
from treescribe.domain.config import get_default_settings  # noqa: E402
from treescribe.domain.tree_models import default_snapshot  # noqa: E402
from treescribe.infra.logging import LoggingConfig  # noqa: E402
from treescribe.interface.gui import app as app_module  # noqa: E402


@pytest.mark.gui
def test_startup_and_close_sequence(caplog) -> None:
    settings = get_default_settings()
    settings["log_level"] = "DEBUG"

    window = MagicMock()
    window.geometry.return_value = "800x600"
    repository = MagicMock()
    repository.load.return_value = (default_snapshot(), "note")

    with patch.object(app_module.cfg, "get_app_settings", return_value=settings), \
            patch.object(app_module.cfg, "save_app_settings") as save_settings, \
            patch.object(app_module, "configure_logging") as configure, \
            patch.object(app_module, "shutdown_logging") as shutdown, \
            patch.object(app_module, "WorkspaceRepository", return_value=repository), \
            patch.object(app_module, "create_main_window", return_value=window), \
            patch.object(app_module, "WorkspaceFrame") as frame_cls, \
            patch.object(app_module, "TkClipboard"):
        with caplog.at_level(logging.INFO, logger=app_module.__name__):
            app_module.main()

        logging_cfg = configure.call_args[0][0]
        assert isinstance(logging_cfg, LoggingConfig)
        assert logging_cfg.level == "DEBUG"
        assert logging_cfg.log_file

        assert f"v{treescribe.__version__}" in caplog.text
        frame_cls.return_value.set_scratch_text.assert_called_once_with("note")
        window.mainloop.assert_called_once()
        shutdown.assert_not_called()

        event_name, on_close = window.protocol.call_args[0]
        assert event_name == "WM_DELETE_WINDOW"
        on_close()

        save_settings.assert_called_once_with({"window_geometry": "800x600"})
        window.destroy.assert_called_once()
        shutdown.assert_called_once()
