from __future__ import annotations

"""
Clipboard Domain Models.

Result object exchanged between the clipboard collaborator and the
interface layer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClipboardResult:
    """
    Outcome of a single copy request.

    Attributes:
        ok: True when the text reached the clipboard.
        error: Failure description reported by the windowing system.
    """
    ok: bool
    error: str = ""
