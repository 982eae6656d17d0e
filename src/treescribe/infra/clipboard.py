from __future__ import annotations

"""
Clipboard Integration.

Wraps the Tk clipboard of the running application window. Copy failures
are reported as a result object so the interface can show a transient
notification without touching the tree state.
"""

import logging
import tkinter as tk
from typing import Any

from treescribe.domain.clipboard_models import ClipboardResult

logger = logging.getLogger(__name__)


class TkClipboard:
    """Clipboard collaborator bound to one Tk widget (usually the root window)."""

    def __init__(self, widget: Any):
        self._widget = widget

    def copy_text(self, text: str) -> ClipboardResult:
        """
        Replace the clipboard content with the given text.

        Args:
            text: Payload to copy, e.g. the structured tree export.

        Returns:
            ClipboardResult: Success flag and error message.
        """
        try:
            self._widget.clipboard_clear()
            self._widget.clipboard_append(text)
            # Flush so the selection survives a quick application exit
            self._widget.update()
        except tk.TclError as e:
            logger.error(f"Clipboard: Copy rejected by the environment: {e}")
            return ClipboardResult(ok=False, error=str(e))

        logger.debug(f"Clipboard: Copied {len(text)} character(s)")
        return ClipboardResult(ok=True)
