from __future__ import annotations

"""
Tree Store.

Snapshot-replacement operations over the virtual tree. The module-level
functions are pure: they take the current snapshot and return a new one
(or the very same object when the call is a no-op). TreeStore owns the
live snapshot and forwards every change to a persistence callback.
"""

import logging
import uuid
from typing import Callable, List, Optional

from treescribe.core.tree.builder import build_path_nodes
from treescribe.core.tree.navigation import collect_descendant_ids, find_node
from treescribe.core.tree.resolver import resolve_deepest_folder
from treescribe.domain.constants import PATH_SEPARATOR
from treescribe.domain.tree_models import IdFactory, Node, TreeSnapshot, default_snapshot

logger = logging.getLogger(__name__)

ChangeListener = Callable[[TreeSnapshot], None]


def generate_node_id() -> str:
    """Collision-resistant node identifier."""
    return uuid.uuid4().hex


# -----------------------------------------------------------------------------
# PURE SNAPSHOT OPERATIONS
# -----------------------------------------------------------------------------

def add_path(
        snapshot: TreeSnapshot,
        path: str,
        id_factory: IdFactory = generate_node_id,
) -> TreeSnapshot:
    """
    Materialize a slash-delimited path in the tree.

    The deepest existing folder prefix is resolved first; only the remaining
    suffix is built, hanging from that folder. Blank input and paths that
    already exist leave the snapshot untouched.

    Args:
        snapshot: Current tree state.
        path: Raw user input, e.g. "src/utils/io.py".
        id_factory: Source of identifiers for the new nodes.

    Returns:
        TreeSnapshot: The snapshot with the new nodes appended.
    """
    trimmed = (path or "").strip()
    if not trimmed:
        return snapshot

    deepest = resolve_deepest_folder(trimmed, snapshot)
    if deepest is not None:
        suffix = trimmed[len(deepest.path) + len(PATH_SEPARATOR):]
    else:
        suffix = trimmed

    new_nodes = build_path_nodes(suffix, snapshot, anchor=deepest, id_factory=id_factory)
    if not new_nodes:
        return snapshot

    return snapshot + tuple(new_nodes)


def edit_content(snapshot: TreeSnapshot, node_id: str, content: str) -> TreeSnapshot:
    """Replace the content of one file node. Unknown ids and folders are ignored."""
    target = find_node(snapshot, node_id)
    if target is None or not target.is_file or target.content == content:
        return snapshot

    return tuple(n.with_content(content) if n.id == node_id else n for n in snapshot)


def delete_subtree(snapshot: TreeSnapshot, node_id: str) -> TreeSnapshot:
    """
    Remove a node together with all of its transitive descendants.

    The root is never removed: deleting it clears the tree down to the
    bare root folder.
    """
    target = find_node(snapshot, node_id)
    if target is None:
        return snapshot

    doomed = collect_descendant_ids(snapshot, node_id)
    if not target.is_root:
        doomed.add(node_id)

    if not doomed:
        return snapshot

    return tuple(n for n in snapshot if n.id not in doomed)


def toggle_open(snapshot: TreeSnapshot, node_id: str) -> TreeSnapshot:
    """Flip the expansion flag of one folder. Files and unknown ids are ignored."""
    target = find_node(snapshot, node_id)
    if target is None or target.is_file:
        return snapshot

    return tuple(n.toggled() if n.id == node_id else n for n in snapshot)


# -----------------------------------------------------------------------------
# STATEFUL FACADE
# -----------------------------------------------------------------------------

class TreeStore:
    """
    Holder of the live tree snapshot.

    Each operation replaces the snapshot as a whole and, when something
    actually changed, hands the new snapshot to the change listener
    (the persistence collaborator) before returning.
    """

    def __init__(
            self,
            snapshot: Optional[TreeSnapshot] = None,
            *,
            on_change: Optional[ChangeListener] = None,
            id_factory: IdFactory = generate_node_id,
    ):
        self._snapshot: TreeSnapshot = tuple(snapshot) if snapshot else default_snapshot()
        self._on_change = on_change
        self._id_factory = id_factory

    @property
    def snapshot(self) -> TreeSnapshot:
        return self._snapshot

    def get(self, node_id: str) -> Optional[Node]:
        return find_node(self._snapshot, node_id)

    def add_path(self, path: str) -> List[Node]:
        """
        Add a path and return the nodes that were created.

        An empty list means the call was a no-op.
        """
        before = len(self._snapshot)
        updated = add_path(self._snapshot, path, self._id_factory)
        if not self._commit(updated):
            logger.debug(f"TreeStore: Nothing to add for {path!r}")
            return []

        created = list(updated[before:])
        logger.debug(f"TreeStore: Added {len(created)} node(s) for {path!r}")
        return created

    def edit_content(self, node_id: str, content: str) -> bool:
        return self._commit(edit_content(self._snapshot, node_id, content))

    def delete_subtree(self, node_id: str) -> bool:
        before = len(self._snapshot)
        changed = self._commit(delete_subtree(self._snapshot, node_id))
        if changed:
            logger.debug(f"TreeStore: Removed {before - len(self._snapshot)} node(s) under '{node_id}'")
        return changed

    def toggle_open(self, node_id: str) -> bool:
        return self._commit(toggle_open(self._snapshot, node_id))

    def _commit(self, updated: TreeSnapshot) -> bool:
        """Install a new snapshot and notify the listener. Returns False on no-op."""
        if updated is self._snapshot:
            return False

        self._snapshot = updated
        if self._on_change is not None:
            self._on_change(updated)
        return True
