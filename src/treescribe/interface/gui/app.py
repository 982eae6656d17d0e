from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle.

Sets up logging, restores settings and the saved workspace, assembles the
window and the controller, and runs the Tk main loop. Window geometry is
written back to the settings on close.
"""

import logging

from treescribe import __version__
from treescribe.core.tree.store import TreeStore
from treescribe.domain import config as cfg
from treescribe.infra.clipboard import TkClipboard
from treescribe.infra.fs import get_default_log_path
from treescribe.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from treescribe.infra.storage import WorkspaceRepository
from treescribe.interface.gui.components.main_window import create_main_window
from treescribe.interface.gui.components.workspace import WorkspaceFrame
from treescribe.interface.gui.controllers.main_controller import AppController
from treescribe.utils.i18n import i18n

logger = logging.getLogger(__name__)


def main() -> None:
    """
    Initialize and launch the Graphical User Interface.

    Startup runs in four phases: diagnostics, state recovery, view
    construction and controller binding, then the event loop.
    """
    # -----------------------------------------------------------------------------
    # PHASE 1: DIAGNOSTICS
    # -----------------------------------------------------------------------------
    settings = cfg.get_app_settings()
    configure_logging(LoggingConfig.from_settings(settings, log_file=get_default_log_path()))
    logger.info(f"GUI Lifecycle: Initializing v{__version__}")

    if settings.get("locale") != i18n.locale:
        i18n.load_locale(settings["locale"])

    # -----------------------------------------------------------------------------
    # PHASE 2: WORKSPACE RECOVERY
    # -----------------------------------------------------------------------------
    repository = WorkspaceRepository()
    snapshot, scratch_text = repository.load()
    store = TreeStore(snapshot, on_change=repository.save)

    # -----------------------------------------------------------------------------
    # PHASE 3: VIEW AND CONTROLLER
    # -----------------------------------------------------------------------------
    app = create_main_window(settings)
    controller = AppController(store, repository, TkClipboard(app), settings)

    workspace = WorkspaceFrame(app, controller)
    workspace.grid(row=0, column=0, sticky="nsew", padx=20, pady=20)

    controller.register_view(workspace)
    controller.start(scratch_text)

    def _on_close() -> None:
        cfg.save_app_settings({"window_geometry": app.geometry()})
        logger.info("GUI Lifecycle: Shutting down")
        app.destroy()
        shutdown_logging()

    app.protocol("WM_DELETE_WINDOW", _on_close)

    # -----------------------------------------------------------------------------
    # PHASE 4: EVENT LOOP
    # -----------------------------------------------------------------------------
    app.mainloop()
