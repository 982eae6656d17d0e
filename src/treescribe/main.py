from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Launches the GUI and installs a last-resort exception hook so that an
unexpected crash is logged and reported to the user instead of vanishing
with the window.
"""

import logging
import sys
import traceback
from typing import Any


def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and show it in a native error dialog.

    Falls back to stderr when no dialog can be displayed (e.g. no display).

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("treescribe.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    try:
        import tkinter as tk
        import tkinter.messagebox as mb

        from treescribe.utils.i18n import i18n

        root = tk.Tk()
        root.withdraw()
        mb.showerror(i18n.t("gui.dialogs.error_title"), i18n.t("gui.dialogs.fatal_body", error=error_msg))
        root.destroy()
    except Exception:
        print(f"CRITICAL SYSTEM ERROR: {error_msg}\n{stack_trace}", file=sys.stderr)


def main() -> int:
    """
    Start the application.

    Returns:
        int: Process exit code (0: Success, 1: Error).
    """
    sys.excepthook = global_exception_handler

    try:
        from treescribe.interface.gui.app import main as gui_main
        gui_main()
        return 0
    except Exception as e:
        global_exception_handler(type(e), e, sys.exc_info()[2])
        return 1


if __name__ == "__main__":
    sys.exit(main())
