from __future__ import annotations

"""
Unit tests for Tree Domain Models.

Verifies:
1. Immutability of nodes.
2. Root factory defaults.
3. Conversion to and from persisted records.
"""

from dataclasses import FrozenInstanceError

import pytest

from treescribe.domain.tree_models import (
    Node,
    create_root,
    looks_like_file,
    node_from_record,
    node_to_record,
)


def test_node_is_immutable() -> None:
    root = create_root()
    with pytest.raises(FrozenInstanceError):
        root.name = "other"  # type: ignore[misc]


def test_root_defaults() -> None:
    root = create_root()
    assert (root.id, root.name, root.path) == ("root", "app", "app")
    assert root.is_root
    assert root.is_open is True
    assert root.is_file is False


@pytest.mark.parametrize("name, expected", [
    ("main.py", True),
    (".env", True),
    ("v1.2", True),
    ("Makefile", False),
    ("src", False),
])
def test_looks_like_file(name, expected) -> None:
    assert looks_like_file(name) is expected


def test_file_record_uses_storage_field_names(sample_tree) -> None:
    record = node_to_record(sample_tree[2])
    assert record == {
        "id": "b",
        "name": "b.txt",
        "isFile": True,
        "parentId": "a",
        "path": "app/a/b.txt",
        "isOpen": False,
        "content": "hello",
    }


def test_folder_record_omits_content(sample_tree) -> None:
    record = node_to_record(sample_tree[0])
    assert "content" not in record
    assert record["parentId"] is None


def test_record_round_trip(sample_tree) -> None:
    assert tuple(node_from_record(node_to_record(n)) for n in sample_tree) == sample_tree


def test_from_record_fills_missing_file_content() -> None:
    node = node_from_record({"id": "x", "name": "x.md", "isFile": True, "parentId": "root", "path": "app/x.md"})
    assert node.content == ""
    assert node.is_open is False


def test_from_record_drops_folder_content() -> None:
    node = node_from_record({"id": "d", "name": "d", "isFile": False, "parentId": "root",
                             "path": "app/d", "content": "stray"})
    assert node.content is None


@pytest.mark.parametrize("record", [
    [],
    {"name": "a", "path": "app/a"},
    {"id": "", "name": "a", "path": "app/a"},
    {"id": "a", "name": 3, "path": "app/a"},
    {"id": "a", "name": "a", "path": "app/a", "parentId": 7},
    {"id": "a", "name": "a", "path": "app/a", "isFile": "false"},
    {"id": "a", "name": "a", "path": "app/a", "isFile": 1},
    {"id": "a", "name": "a", "path": "app/a", "isOpen": "true"},
])
def test_from_record_rejects_malformed_input(record) -> None:
    with pytest.raises(ValueError):
        node_from_record(record)


def test_with_content_and_toggled_return_copies() -> None:
    node = Node(id="f", name="f.txt", is_file=True, parent_id="root", path="app/f.txt", content="")
    edited = node.with_content("abc")
    assert edited.content == "abc"
    assert node.content == ""
    assert node.toggled().is_open is True
