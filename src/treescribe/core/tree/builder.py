from __future__ import annotations

"""
Tree Builder.

Synthesizes the chain of nodes missing for a path suffix. Folders are
created for every segment except a trailing segment carrying an extension,
which becomes an empty file.
"""

import logging
from typing import Dict, Iterable, List, Optional

from treescribe.domain.constants import PATH_SEPARATOR, ROOT_NAME
from treescribe.domain.tree_models import IdFactory, Node, create_root, looks_like_file

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_path_nodes(
        suffix: str,
        nodes: Iterable[Node],
        *,
        anchor: Optional[Node],
        id_factory: IdFactory,
) -> List[Node]:
    """
    Create the nodes needed to materialize a path suffix.

    With an anchor folder the chain is built beneath it. Without one, the
    chain is rooted at "app": inputs that do not start with the root name
    are nested under the root rather than creating sibling roots.

    Segments whose cumulative path already exists are reused as the next
    parent instead of being duplicated. If an existing file sits in the
    middle of the chain, nothing is built.

    Args:
        suffix: Unresolved part of the user input.
        nodes: Current tree snapshot.
        anchor: Deepest existing folder the suffix hangs from, if any.
        id_factory: Source of fresh node identifiers.

    Returns:
        List[Node]: New nodes in creation order (parents before children).
    """
    parts = _split_segments(suffix)
    if not parts:
        return []

    by_path: Dict[str, Node] = {n.path: n for n in nodes}

    if anchor is not None:
        current_path = anchor.path
        parent_id: Optional[str] = anchor.id
    else:
        if parts[0] != ROOT_NAME:
            parts = [ROOT_NAME, *parts]
        current_path = ""
        parent_id = None

    last_index = len(parts) - 1
    created: List[Node] = []

    for i, part in enumerate(parts):
        current_path = f"{current_path}{PATH_SEPARATOR}{part}" if current_path else part

        existing = by_path.get(current_path)
        if existing is not None:
            if existing.is_file and i < last_index:
                logger.debug(f"Builder: '{current_path}' is a file; refusing to nest under it.")
                return []
            parent_id = existing.id
            continue

        if parent_id is None:
            # Only reachable when the snapshot lost its root
            node = create_root()
        else:
            is_file = i == last_index and looks_like_file(part)
            node = Node(
                id=id_factory(),
                name=part,
                is_file=is_file,
                parent_id=parent_id,
                path=current_path,
                content="" if is_file else None,
                is_open=not is_file,
            )

        created.append(node)
        by_path[current_path] = node
        parent_id = node.id

    return created

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _split_segments(path: str) -> List[str]:
    """Split on the separator, trimming names and dropping empty segments."""
    return [p.strip() for p in path.split(PATH_SEPARATOR) if p.strip()]
