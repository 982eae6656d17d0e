from __future__ import annotations

"""
Tree Navigation Queries.

Read-only helpers over a flat snapshot: id lookup, ordered child lists,
transitive descendant collection and the visible-row projection used by
the tree view.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from treescribe.domain.tree_models import Node, sibling_sort_key

ChildIndex = Dict[Optional[str], List[Node]]


@dataclass(frozen=True)
class TreeRow:
    """One rendered row of the tree view."""
    node: Node
    depth: int


# -----------------------------------------------------------------------------
# LOOKUPS
# -----------------------------------------------------------------------------

def find_node(nodes: Iterable[Node], node_id: str) -> Optional[Node]:
    for node in nodes:
        if node.id == node_id:
            return node
    return None


def index_children(nodes: Iterable[Node]) -> ChildIndex:
    """
    Group nodes by parent id, each group sorted folders-first then by name.

    The root group lives under the None key.
    """
    index: ChildIndex = defaultdict(list)
    for node in nodes:
        index[node.parent_id].append(node)
    for siblings in index.values():
        siblings.sort(key=sibling_sort_key)
    return index


def collect_descendant_ids(nodes: Iterable[Node], node_id: str) -> Set[str]:
    """
    Return the ids of every transitive descendant of a node.

    Uses an explicit stack; the starting id itself is not included.
    """
    index = index_children(nodes)
    found: Set[str] = set()
    stack = [node_id]

    while stack:
        current = stack.pop()
        for child in index.get(current, []):
            if child.id not in found:
                found.add(child.id)
                stack.append(child.id)

    return found


# -----------------------------------------------------------------------------
# VIEW PROJECTION
# -----------------------------------------------------------------------------

def build_visible_rows(nodes: Iterable[Node]) -> List[TreeRow]:
    """
    Flatten the snapshot into pre-ordered rows for display.

    Starts at the root (depth 0) and hides the children of closed folders.
    """
    index = index_children(nodes)
    rows: List[TreeRow] = []
    stack = [(node, 0) for node in reversed(index.get(None, []))]

    while stack:
        node, depth = stack.pop()
        rows.append(TreeRow(node=node, depth=depth))
        if node.is_file or not node.is_open:
            continue
        for child in reversed(index.get(node.id, [])):
            stack.append((child, depth + 1))

    return rows
