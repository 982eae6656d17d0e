from __future__ import annotations

"""
Main Application Window Factory.

Creates the root CustomTkinter window and applies the appearance settings.
"""

from typing import Any, Dict

import customtkinter as ctk

from treescribe import __version__
from treescribe.utils.i18n import i18n


def create_main_window(settings: Dict[str, Any]) -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        settings: Active application settings (appearance, geometry).

    Returns:
        ctk.CTk: The configured root application instance.
    """
    ctk.set_appearance_mode(settings.get("appearance_mode", "System"))
    ctk.set_default_color_theme(settings.get("color_theme", "blue"))

    app = ctk.CTk()
    app.title(i18n.t("app.title", version=__version__))
    app.geometry(settings.get("window_geometry", "1000x700"))
    app.minsize(640, 420)

    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=1)

    return app
