from __future__ import annotations

"""
Path Resolver.

Locates the deepest existing folder whose path is a prefix of a
slash-delimited input string.
"""

from typing import Dict, Iterable, Optional

from treescribe.domain.constants import PATH_SEPARATOR
from treescribe.domain.tree_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_deepest_folder(path: str, nodes: Iterable[Node]) -> Optional[Node]:
    """
    Walk the input segment by segment against the existing folders.

    The walk stops at the first prefix that is not a folder. A prefix that
    matches a file also stops it, so resolution never descends into or past
    a file node.

    Args:
        path: Raw slash-delimited input, e.g. "app/src/main.py".
        nodes: Current tree snapshot.

    Returns:
        Optional[Node]: Deepest matched folder, or None if the first
        segment already misses.
    """
    folders: Dict[str, Node] = {n.path: n for n in nodes if not n.is_file}

    current_path = ""
    deepest: Optional[Node] = None

    for part in path.split(PATH_SEPARATOR):
        current_path = f"{current_path}{PATH_SEPARATOR}{part}" if current_path else part
        folder = folders.get(current_path)
        if folder is None:
            break
        deepest = folder

    return deepest
