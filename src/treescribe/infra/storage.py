from __future__ import annotations

"""
Workspace Persistence.

Stores the tree snapshot as a JSON array of flat node records and the
scratch text as a plain file. Loading is forgiving: missing or corrupted
files fall back to a fresh workspace holding only the root folder.
Writes never raise; failures are logged and the in-memory state stays
authoritative.
"""

import json
import logging
import os
from typing import Any, List, Optional, Set, Tuple

from treescribe.domain.constants import PATH_SEPARATOR, ROOT_ID
from treescribe.domain.tree_models import (
    Node,
    TreeSnapshot,
    create_root,
    default_snapshot,
    node_from_record,
    node_to_record,
)
from treescribe.infra.fs import get_workspace_dir, write_text_file

logger = logging.getLogger(__name__)

ITEMS_FILE_NAME = "items.json"
TEXT_FILE_NAME = "backup_text.txt"


class WorkspaceRepository:
    """
    File-backed persistence collaborator of the tree store.

    Attributes:
        directory: Folder containing the workspace files.
    """

    def __init__(self, directory: Optional[str] = None):
        self.directory = directory or get_workspace_dir()

    @property
    def items_path(self) -> str:
        return os.path.join(self.directory, ITEMS_FILE_NAME)

    @property
    def text_path(self) -> str:
        return os.path.join(self.directory, TEXT_FILE_NAME)

    # -------------------------------------------------------------------------
    # LOAD
    # -------------------------------------------------------------------------

    def load(self) -> Tuple[TreeSnapshot, str]:
        """
        Restore the last saved workspace.

        Returns:
            Tuple[TreeSnapshot, str]: (Node snapshot, scratch text).
        """
        return self._load_nodes(), self._load_text()

    def _load_nodes(self) -> TreeSnapshot:
        if not os.path.exists(self.items_path):
            logger.debug("Storage: No saved tree found. Starting from the root folder.")
            return default_snapshot()

        try:
            with open(self.items_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            nodes = _parse_records(data)
        except (OSError, ValueError) as e:
            logger.warning(f"Storage: Saved tree at '{self.items_path}' is unreadable ({e}). Resetting.")
            return default_snapshot()

        if not any(n.id == ROOT_ID for n in nodes):
            logger.warning("Storage: Saved tree has no root folder. Re-inserting it.")
            nodes.insert(0, create_root())

        logger.info(f"Storage: Restored {len(nodes)} node(s) from '{self.items_path}'")
        return tuple(nodes)

    def _load_text(self) -> str:
        if not os.path.exists(self.text_path):
            return ""
        try:
            with open(self.text_path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Storage: Scratch text at '{self.text_path}' is unreadable ({e}).")
            return ""

    # -------------------------------------------------------------------------
    # SAVE
    # -------------------------------------------------------------------------

    def save(self, nodes: TreeSnapshot) -> None:
        """Persist the full snapshot, field for field."""
        payload = json.dumps([node_to_record(n) for n in nodes], ensure_ascii=False, indent=2)
        try:
            write_text_file(self.items_path, payload)
            logger.debug(f"Storage: Saved {len(nodes)} node(s)")
        except OSError as e:
            logger.error(f"Storage: Failed to save tree to '{self.items_path}': {e}")

    def save_text(self, text: str) -> None:
        try:
            write_text_file(self.text_path, text)
        except OSError as e:
            logger.error(f"Storage: Failed to save scratch text to '{self.text_path}': {e}")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_records(data: Any) -> List[Node]:
    """
    Convert raw JSON into nodes and check the structural invariants.

    Raises:
        ValueError: On a non-list payload, a malformed record, duplicated
            ids or paths, or a broken parent chain.
    """
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of node records")

    nodes = [node_from_record(record) for record in data]

    ids: Set[str] = set()
    paths: Set[str] = set()
    for node in nodes:
        if node.id in ids:
            raise ValueError(f"duplicated node id '{node.id}'")
        if node.path in paths:
            raise ValueError(f"duplicated node path '{node.path}'")
        ids.add(node.id)
        paths.add(node.path)

    by_id = {n.id: n for n in nodes}
    for node in nodes:
        if node.parent_id is None:
            if node.id != ROOT_ID:
                raise ValueError(f"unexpected top-level node '{node.path}'")
            continue

        parent = by_id.get(node.parent_id)
        if parent is None:
            raise ValueError(f"node '{node.path}' references missing parent '{node.parent_id}'")
        if parent.is_file:
            raise ValueError(f"node '{node.path}' is nested under file '{parent.path}'")
        # Consistent paths also rule out parent cycles
        if node.path != f"{parent.path}{PATH_SEPARATOR}{node.name}":
            raise ValueError(f"node path '{node.path}' does not match its parent chain")

    return nodes
