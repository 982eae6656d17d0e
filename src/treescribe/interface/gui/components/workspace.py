from __future__ import annotations

"""
Workspace View.

The single screen of the application: a header with the add and global copy
actions, the collapsible tree on the left and the free-form scratch text on
the right. The frame only renders; every action is forwarded to the
AppController.
"""

from typing import Any, Callable, List

import customtkinter as ctk

from treescribe.core.tree.navigation import TreeRow
from treescribe.domain.tree_models import Node
from treescribe.interface.gui.dialogs.add_node_modal import show_add_node_dialog
from treescribe.interface.gui.dialogs.edit_content_modal import show_edit_content_dialog
from treescribe.interface.gui.dialogs.toast import show_toast
from treescribe.utils.i18n import i18n

INDENT_PX = 20
ICON_FOLDER = "\U0001F4C1"
ICON_FILE = "\U0001F4C4"
CHEVRON_OPEN = "▾"
CHEVRON_CLOSED = "▸"


class WorkspaceFrame(ctk.CTkFrame):
    """Tree pane plus scratch pad, bound to one controller."""

    def __init__(self, master: Any, controller: Any, **kwargs: Any):
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.controller = controller
        self._row_widgets: List[ctk.CTkFrame] = []

        self.grid_columnconfigure(0, weight=2)
        self.grid_columnconfigure(1, weight=3)
        self.grid_rowconfigure(1, weight=1)

        # -----------------------------------------------------------------------------
        # HEADER
        # -----------------------------------------------------------------------------
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, columnspan=2, sticky="ew", pady=(0, 10))
        header.grid_columnconfigure(2, weight=1)

        ctk.CTkLabel(header, text=i18n.t("gui.tree.root_label"), text_color="gray").grid(
            row=0, column=0, padx=(5, 10)
        )
        self.btn_add = ctk.CTkButton(header, text="+", width=32, command=controller.request_add)
        self.btn_add.grid(row=0, column=1)

        ctk.CTkLabel(
            header,
            text=i18n.t("app.header"),
            font=ctk.CTkFont(size=18, weight="bold")
        ).grid(row=0, column=2)

        self.btn_copy_tree = ctk.CTkButton(
            header,
            text=i18n.t("gui.tree.copy_tree"),
            width=110,
            command=controller.copy_tree
        )
        self.btn_copy_tree.grid(row=0, column=3, padx=5)

        # -----------------------------------------------------------------------------
        # BODY
        # -----------------------------------------------------------------------------
        self.tree_panel = ctk.CTkScrollableFrame(self)
        self.tree_panel.grid(row=1, column=0, sticky="nsew", padx=(0, 10))

        self.scratch = ctk.CTkTextbox(self, font=("Consolas", 12), wrap="word")
        self.scratch.grid(row=1, column=1, sticky="nsew")
        # Fires for typed and pasted edits
        self.scratch.bind("<<Modified>>", self._on_scratch_modified)

    # -------------------------------------------------------------------------
    # RENDERING
    # -------------------------------------------------------------------------

    def render_rows(self, rows: List[TreeRow]) -> None:
        """Rebuild the tree pane from the controller's visible rows."""
        for widget in self._row_widgets:
            widget.destroy()
        self._row_widgets = [self._build_row(row) for row in rows]

    def _build_row(self, row: TreeRow) -> ctk.CTkFrame:
        node = row.node
        frame = ctk.CTkFrame(self.tree_panel, fg_color="transparent")
        frame.pack(anchor="w", padx=(row.depth * INDENT_PX, 0), pady=1)

        if node.is_file:
            ctk.CTkLabel(frame, text=f"{ICON_FILE} {node.name}").pack(side="left", padx=(28, 4))
            self._icon_button(frame, "✎", lambda: self.controller.request_edit(node.id))
        else:
            chevron = CHEVRON_OPEN if node.is_open else CHEVRON_CLOSED
            self._icon_button(frame, chevron, lambda: self.controller.toggle_node(node.id))
            label = ctk.CTkLabel(frame, text=f"{ICON_FOLDER} {node.name}", cursor="hand2")
            label.pack(side="left", padx=4)
            label.bind("<Button-1>", lambda _event: self.controller.toggle_node(node.id))

        self._icon_button(frame, "✕", lambda: self.controller.delete_node(node.id))
        return frame

    @staticmethod
    def _icon_button(master: Any, text: str, command: Callable[[], None]) -> ctk.CTkButton:
        button = ctk.CTkButton(
            master,
            text=text,
            width=24,
            height=24,
            fg_color="transparent",
            text_color=("gray30", "gray70"),
            hover_color=("gray80", "gray25"),
            command=command,
        )
        button.pack(side="left", padx=1)
        return button

    # -------------------------------------------------------------------------
    # SCRATCH TEXT
    # -------------------------------------------------------------------------

    def set_scratch_text(self, text: str) -> None:
        self.scratch.delete("1.0", "end")
        self.scratch.insert("1.0", text)
        # Restored text is already persisted
        self.scratch.edit_modified(False)

    def _on_scratch_modified(self, _event: object = None) -> None:
        """
        Persist the scratch text after any edit.

        Tk raises <<Modified>> only when the flag flips, so it is cleared
        after each save; the event caused by clearing it is ignored.
        """
        if not self.scratch.edit_modified():
            return
        self.controller.on_scratch_changed(self.scratch.get("1.0", "end-1c"))
        self.scratch.edit_modified(False)

    # -------------------------------------------------------------------------
    # DIALOGS & NOTIFICATIONS
    # -------------------------------------------------------------------------

    def show_add_dialog(self, on_submit: Callable[[str], bool]) -> None:
        show_add_node_dialog(self.winfo_toplevel(), on_submit)

    def show_edit_dialog(
            self,
            node: Node,
            on_save: Callable[[str], None],
            on_copy: Callable[[str], None],
    ) -> None:
        show_edit_content_dialog(self.winfo_toplevel(), node, on_save, on_copy)

    def notify(self, title: str, message: str = "", kind: str = "info") -> None:
        show_toast(self.winfo_toplevel(), title, message, kind=kind)

    def show_copy_confirmation(self, message: str, duration_ms: int) -> None:
        show_toast(self.winfo_toplevel(), message, duration_ms=duration_ms)
