from __future__ import annotations

"""
Structured Text Serializer.

Converts a tree snapshot into the indented plain-text export: one line per
node, two spaces per depth level, file content on an extra line below the
file name.
"""

from typing import Iterable, List, Tuple

from treescribe.core.tree.navigation import ChildIndex, index_children
from treescribe.domain.constants import INDENT_UNIT
from treescribe.domain.tree_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def serialize_tree(nodes: Iterable[Node]) -> str:
    """
    Produce the structured text export of a snapshot.

    Every emitted line ends with a newline; an empty tree yields "".
    """
    return "".join(f"{line}\n" for line in render_tree_lines(nodes))


def render_tree_lines(nodes: Iterable[Node]) -> List[str]:
    """
    Render the snapshot as a list of indented lines.

    Traversal is an iterative depth-first pre-order (explicit stack) from
    the root's children; the root name itself is not emitted. File
    content is appended verbatim, so a multi-line content keeps its own
    line breaks and only its first line is indented.
    """
    index = index_children(nodes)
    lines: List[str] = []
    stack: List[Tuple[Node, int]] = []
    for root in reversed(index.get(None, [])):
        _push_children(stack, index, root.id, 0)

    while stack:
        node, depth = stack.pop()
        indent = INDENT_UNIT * depth
        lines.append(f"{indent}{node.name}")

        if node.is_file:
            if node.content:
                lines.append(f"{indent}{INDENT_UNIT}{node.content}")
            continue

        _push_children(stack, index, node.id, depth + 1)

    return lines

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _push_children(stack: List[Tuple[Node, int]], index: ChildIndex, parent_id: str, depth: int) -> None:
    # Reversed so the first sibling is popped first
    for child in reversed(index.get(parent_id, [])):
        stack.append((child, depth))
