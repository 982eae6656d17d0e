from __future__ import annotations

"""
File Content Editor.

Modal multi-line editor bound to a single file node, offering Save (write
the text back to the tree and close) and Copy (send the current text to
the clipboard without saving).
"""

from typing import Callable

import customtkinter as ctk

from treescribe.domain.tree_models import Node
from treescribe.utils.i18n import i18n


def show_edit_content_dialog(
        parent: ctk.CTk,
        node: Node,
        on_save: Callable[[str], None],
        on_copy: Callable[[str], None],
) -> ctk.CTkToplevel:
    """
    Display the content editor for one file.

    Args:
        parent: Parent UI window reference.
        node: File node being edited.
        on_save: Receives the edited text when the user saves.
        on_copy: Receives the current text when the user copies.

    Returns:
        ctk.CTkToplevel: The dialog window.
    """
    toplevel = ctk.CTkToplevel(parent)
    toplevel.title(f"{i18n.t('gui.edit_dialog.title')} - {node.name}")
    toplevel.geometry("520x420")
    toplevel.transient(parent)
    toplevel.grab_set()
    toplevel.grid_columnconfigure(0, weight=1)
    toplevel.grid_rowconfigure(1, weight=1)

    ctk.CTkLabel(toplevel, text=node.path, anchor="w").grid(
        row=0, column=0, sticky="ew", padx=20, pady=(15, 5)
    )

    textbox = ctk.CTkTextbox(toplevel, font=("Consolas", 12), wrap="none")
    textbox.grid(row=1, column=0, sticky="nsew", padx=20, pady=5)
    textbox.insert("1.0", node.content or "")

    def _current_text() -> str:
        # Tk always appends a trailing newline to the buffer
        return textbox.get("1.0", "end-1c")

    def _save() -> None:
        on_save(_current_text())
        toplevel.destroy()

    btn_frame = ctk.CTkFrame(toplevel, fg_color="transparent")
    btn_frame.grid(row=2, column=0, sticky="ew", padx=20, pady=15)

    ctk.CTkButton(
        btn_frame,
        text=i18n.t("gui.edit_dialog.save"),
        command=_save
    ).pack(side="left", expand=True, fill="x", padx=5)

    ctk.CTkButton(
        btn_frame,
        text=i18n.t("gui.edit_dialog.copy"),
        command=lambda: on_copy(_current_text())
    ).pack(side="left", expand=True, fill="x", padx=5)

    toplevel.bind("<Escape>", lambda _event: toplevel.destroy())
    toplevel.after(100, textbox.focus_set)

    return toplevel
