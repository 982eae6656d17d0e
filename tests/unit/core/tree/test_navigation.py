from __future__ import annotations

"""
Unit tests for Tree Navigation queries.
"""

from treescribe.core.tree.navigation import (
    build_visible_rows,
    collect_descendant_ids,
    find_node,
    index_children,
)
from treescribe.core.tree.store import toggle_open


def test_find_node(sample_tree) -> None:
    assert find_node(sample_tree, "a").name == "a"
    assert find_node(sample_tree, "nope") is None


def test_index_children_groups_and_sorts(sample_tree) -> None:
    index = index_children(sample_tree)

    assert [n.id for n in index[None]] == ["root"]
    assert [n.id for n in index["root"]] == ["a", "c"]
    assert [n.id for n in index["a"]] == ["b"]


def test_collect_descendant_ids(sample_tree) -> None:
    assert collect_descendant_ids(sample_tree, "root") == {"a", "b", "c"}
    assert collect_descendant_ids(sample_tree, "a") == {"b"}
    assert collect_descendant_ids(sample_tree, "b") == set()
    assert collect_descendant_ids(sample_tree, "missing") == set()


def test_visible_rows_in_preorder_with_depth(sample_tree) -> None:
    rows = build_visible_rows(sample_tree)
    assert [(r.node.id, r.depth) for r in rows] == [("root", 0), ("a", 1), ("b", 2), ("c", 1)]


def test_closed_folder_hides_children(sample_tree) -> None:
    rows = build_visible_rows(toggle_open(sample_tree, "a"))
    assert [r.node.id for r in rows] == ["root", "a", "c"]


def test_closed_root_shows_only_root(sample_tree) -> None:
    rows = build_visible_rows(toggle_open(sample_tree, "root"))
    assert [r.node.id for r in rows] == ["root"]
