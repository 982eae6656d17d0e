from __future__ import annotations

"""
Main Application Controller.

Bridges the workspace view and the tree core. Owns the TreeStore holding
the live snapshot, routes user actions (add, edit, toggle, delete, copy)
to it, refreshes the tree view after every change and turns clipboard
outcomes into transient notifications.
"""

import logging
from typing import Any, Dict

from treescribe.core.tree.navigation import build_visible_rows
from treescribe.core.tree.serializer import serialize_tree
from treescribe.core.tree.store import TreeStore
from treescribe.domain.clipboard_models import ClipboardResult
from treescribe.infra.storage import WorkspaceRepository
from treescribe.utils.i18n import i18n

logger = logging.getLogger(__name__)

DEFAULT_TOAST_MS = 1500


class AppController:
    """
    Central controller between the workspace view and the tree store.

    The view is any object exposing render_rows, set_scratch_text,
    show_add_dialog, show_edit_dialog, notify and show_copy_confirmation.
    """

    def __init__(
            self,
            store: TreeStore,
            repository: WorkspaceRepository,
            clipboard: Any,
            settings: Dict[str, Any],
    ):
        """
        Initialize the controller with its collaborators.

        Args:
            store: Holder of the live tree snapshot.
            repository: Persistence collaborator, used here for the scratch text.
            clipboard: Object with a copy_text(str) -> ClipboardResult method.
            settings: Active application settings.
        """
        self.store = store
        self.repository = repository
        self.clipboard = clipboard
        self.settings = settings
        self.view: Any = None

    # -------------------------------------------------------------------------
    # VIEW LIFECYCLE
    # -------------------------------------------------------------------------

    def register_view(self, view: Any) -> None:
        self.view = view

    def start(self, scratch_text: str) -> None:
        """Populate the view with the restored workspace."""
        if not self.view:
            return
        self.view.set_scratch_text(scratch_text)
        self.refresh_tree()

    def refresh_tree(self) -> None:
        if not self.view:
            return
        self.view.render_rows(build_visible_rows(self.store.snapshot))

    # -------------------------------------------------------------------------
    # TREE ACTIONS
    # -------------------------------------------------------------------------

    def request_add(self) -> None:
        self.view.show_add_dialog(self.submit_path)

    def submit_path(self, raw_path: str) -> bool:
        """
        Handle the add dialog's confirmation.

        Returns:
            bool: True when nodes were created and the dialog may close.
            Blank or already existing paths keep the dialog open.
        """
        if not raw_path.strip():
            return False

        created = self.store.add_path(raw_path)
        if not created:
            return False

        logger.info(f"Tree: Added '{created[-1].path}'")
        self.refresh_tree()
        return True

    def request_edit(self, node_id: str) -> None:
        node = self.store.get(node_id)
        if node is None or not node.is_file:
            return
        self.view.show_edit_dialog(
            node,
            on_save=lambda text: self.save_content(node_id, text),
            on_copy=self.copy_content,
        )

    def save_content(self, node_id: str, content: str) -> None:
        if self.store.edit_content(node_id, content):
            self.refresh_tree()

    def toggle_node(self, node_id: str) -> None:
        if self.store.toggle_open(node_id):
            self.refresh_tree()

    def delete_node(self, node_id: str) -> None:
        node = self.store.get(node_id)
        if node is None:
            return
        if self.store.delete_subtree(node_id):
            logger.info(f"Tree: Deleted '{node.path}'")
            self.refresh_tree()

    # -------------------------------------------------------------------------
    # EXPORT & SCRATCH TEXT
    # -------------------------------------------------------------------------

    def copy_content(self, text: str) -> None:
        """Copy one file's content and report the outcome."""
        result = self.clipboard.copy_text(text)
        if result.ok:
            self.view.notify(i18n.t("gui.toast.copied_title"), i18n.t("gui.toast.copied_body"))
        else:
            self._notify_copy_failure(result)

    def copy_tree(self) -> None:
        """Export the whole tree as structured text to the clipboard."""
        text = serialize_tree(self.store.snapshot)
        result = self.clipboard.copy_text(text)
        if result.ok:
            duration = int(self.settings.get("toast_duration_ms", DEFAULT_TOAST_MS))
            self.view.show_copy_confirmation(i18n.t("gui.toast.tree_copied"), duration)
        else:
            self._notify_copy_failure(result)

    def on_scratch_changed(self, text: str) -> None:
        self.repository.save_text(text)

    def _notify_copy_failure(self, result: ClipboardResult) -> None:
        logger.warning(f"Clipboard: Copy failed: {result.error}")
        self.view.notify(
            i18n.t("gui.toast.copy_failed_title"),
            i18n.t("gui.toast.copy_failed_body"),
            kind="error",
        )
