from __future__ import annotations

from .builder import build_path_nodes
from .navigation import TreeRow, build_visible_rows, collect_descendant_ids, find_node
from .resolver import resolve_deepest_folder
from .serializer import render_tree_lines, serialize_tree
from .store import TreeStore, add_path, delete_subtree, edit_content, generate_node_id, toggle_open

__all__ = [
    "TreeStore",
    "TreeRow",
    "add_path",
    "edit_content",
    "delete_subtree",
    "toggle_open",
    "generate_node_id",
    "build_path_nodes",
    "resolve_deepest_folder",
    "serialize_tree",
    "render_tree_lines",
    "build_visible_rows",
    "collect_descendant_ids",
    "find_node",
]
