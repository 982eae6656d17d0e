from __future__ import annotations

"""
Virtual Tree Data Models.

Defines the flat node record that makes up a tree snapshot, the root
factory, and the conversion to and from the persisted record format
(camelCase field names of the workspace storage file).
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional, Tuple

from treescribe.domain.constants import FILE_EXTENSION_MARKER, ROOT_ID, ROOT_NAME

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """
    One folder or file entry of the virtual tree.

    Attributes:
        id: Opaque unique identifier assigned at creation.
        name: Single path segment (never contains the separator).
        is_file: True for leaves carrying content, False for folders.
        parent_id: Identifier of the parent node, None only for the root.
        path: Slash-joined path from the root, e.g. "app/src/main.py".
        content: Text of a file node; always None for folders.
        is_open: Expansion flag of a folder in the tree view.
    """
    id: str
    name: str
    is_file: bool
    parent_id: Optional[str]
    path: str
    content: Optional[str] = None
    is_open: bool = False

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    def with_content(self, content: str) -> "Node":
        return replace(self, content=content)

    def toggled(self) -> "Node":
        return replace(self, is_open=not self.is_open)


# Full, immutable node collection representing tree state at one instant
TreeSnapshot = Tuple[Node, ...]

# Source of fresh node identifiers
IdFactory = Callable[[], str]


# -----------------------------------------------------------------------------
# FACTORIES
# -----------------------------------------------------------------------------

def create_root() -> Node:
    """Return the single root folder every snapshot is anchored on."""
    return Node(
        id=ROOT_ID,
        name=ROOT_NAME,
        is_file=False,
        parent_id=None,
        path=ROOT_NAME,
        is_open=True,
    )


def default_snapshot() -> TreeSnapshot:
    return (create_root(),)


def looks_like_file(name: str) -> bool:
    """A trailing segment names a file when it carries an extension marker."""
    return FILE_EXTENSION_MARKER in name


def sibling_sort_key(node: Node) -> Tuple[bool, str]:
    """Folders before files, then lexicographic by name."""
    return node.is_file, node.name


# -----------------------------------------------------------------------------
# RECORD CONVERSION
# -----------------------------------------------------------------------------

def node_to_record(node: Node) -> Dict[str, Any]:
    """
    Flatten a node into its persisted JSON record.

    Folders omit the 'content' key.
    """
    record: Dict[str, Any] = {
        "id": node.id,
        "name": node.name,
        "isFile": node.is_file,
        "parentId": node.parent_id,
        "path": node.path,
        "isOpen": node.is_open,
    }
    if node.content is not None:
        record["content"] = node.content
    return record


def node_from_record(record: Dict[str, Any]) -> Node:
    """
    Rebuild a node from a persisted record.

    Raises:
        ValueError: If a mandatory field is missing or has the wrong type.
    """
    if not isinstance(record, dict):
        raise ValueError(f"Node record must be an object, got {type(record).__name__}")

    try:
        node_id = record["id"]
        name = record["name"]
        path = record["path"]
    except KeyError as e:
        raise ValueError(f"Node record is missing field {e}") from e

    for field_name, value in (("id", node_id), ("name", name), ("path", path)):
        if not isinstance(value, str) or not value:
            raise ValueError(f"Node field '{field_name}' must be a non-empty string")

    parent_id = record.get("parentId")
    if parent_id is not None and not isinstance(parent_id, str):
        raise ValueError("Node field 'parentId' must be a string or null")

    is_file = _read_flag(record, "isFile")
    content = record.get("content")
    if is_file:
        content = "" if content is None else str(content)
    else:
        content = None

    return Node(
        id=node_id,
        name=name,
        is_file=is_file,
        parent_id=parent_id,
        path=path,
        content=content,
        is_open=_read_flag(record, "isOpen"),
    )


def _read_flag(record: Dict[str, Any], key: str) -> bool:
    value = record.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"Node field '{key}' must be a boolean")
    return value
