from __future__ import annotations

"""
Add Node Dialog.

Modal prompt accepting one slash-delimited path. The dialog closes only
when the submit callback reports that something was created, so blank
input leaves it open for correction.
"""

from typing import Callable

import customtkinter as ctk

from treescribe.utils.i18n import i18n


def show_add_node_dialog(parent: ctk.CTk, on_submit: Callable[[str], bool]) -> ctk.CTkToplevel:
    """
    Display the path entry modal.

    Args:
        parent: Parent UI window reference.
        on_submit: Receives the raw input; returns True to close the dialog.

    Returns:
        ctk.CTkToplevel: The dialog window.
    """
    toplevel = ctk.CTkToplevel(parent)
    toplevel.title(i18n.t("gui.add_dialog.title"))
    toplevel.geometry("360x150")
    toplevel.resizable(False, False)
    toplevel.transient(parent)
    toplevel.grab_set()

    entry = ctk.CTkEntry(toplevel, placeholder_text=i18n.t("gui.add_dialog.placeholder"))
    entry.pack(fill="x", padx=20, pady=(25, 10))

    def _confirm(_event: object = None) -> None:
        if on_submit(entry.get()):
            toplevel.destroy()

    ctk.CTkButton(
        toplevel,
        text=i18n.t("gui.add_dialog.confirm"),
        command=_confirm
    ).pack(fill="x", padx=20, pady=10)

    entry.bind("<Return>", _confirm)
    toplevel.bind("<Escape>", lambda _event: toplevel.destroy())
    toplevel.after(100, entry.focus_set)

    return toplevel
