from __future__ import annotations

"""
Unit tests for the Tree Builder.

Verifies file/folder classification, reuse of existing segments, root
anchoring of bare inputs and the refusal to nest under files.
"""

from treescribe.core.tree.builder import build_path_nodes
from treescribe.domain.tree_models import create_root


def _build(suffix, nodes, id_factory, anchor=None):
    return build_path_nodes(suffix, nodes, anchor=anchor, id_factory=id_factory)


def test_bare_input_is_anchored_under_root(root_only, id_factory) -> None:
    created = _build("x/y", root_only, id_factory)

    assert [n.path for n in created] == ["app/x", "app/x/y"]
    assert created[0].parent_id == "root"
    assert created[1].parent_id == created[0].id


def test_only_last_segment_with_extension_is_a_file(root_only, id_factory) -> None:
    created = _build("v1.2/notes/readme.md", root_only, id_factory)

    kinds = {n.name: n.is_file for n in created}
    assert kinds == {"v1.2": False, "notes": False, "readme.md": True}


def test_new_file_and_folder_defaults(root_only, id_factory) -> None:
    folder, file_node = _build("src/main.py", root_only, id_factory)

    assert folder.is_open is True
    assert folder.content is None
    assert file_node.content == ""
    assert file_node.is_open is False


def test_trailing_segment_without_extension_is_a_folder(root_only, id_factory) -> None:
    created = _build("Makefile", root_only, id_factory)
    assert len(created) == 1
    assert created[0].is_file is False


def test_existing_segments_are_reused(sample_tree, id_factory) -> None:
    created = _build("a/d.txt", sample_tree, id_factory)

    assert len(created) == 1
    assert created[0].path == "app/a/d.txt"
    assert created[0].parent_id == "a"


def test_anchor_folder_prefixes_the_chain(sample_tree, id_factory) -> None:
    anchor = next(n for n in sample_tree if n.id == "a")
    created = _build("app/z", sample_tree, id_factory, anchor=anchor)

    # With an anchor, a segment named like the root is an ordinary folder
    assert [n.path for n in created] == ["app/a/app", "app/a/app/z"]
    assert created[0].parent_id == "a"


def test_refuses_to_nest_under_a_file(sample_tree, id_factory) -> None:
    assert _build("c.txt/inner", sample_tree, id_factory) == []


def test_existing_file_as_last_segment_is_a_no_op(sample_tree, id_factory) -> None:
    assert _build("a/b.txt", sample_tree, id_factory) == []


def test_empty_and_blank_segments_are_dropped(root_only, id_factory) -> None:
    created = _build(" a //  b.txt /", root_only, id_factory)
    assert [n.path for n in created] == ["app/a", "app/a/b.txt"]
    assert created[-1].is_file is True


def test_empty_suffix_builds_nothing(root_only, id_factory) -> None:
    assert _build("", root_only, id_factory) == []
    assert _build("///", root_only, id_factory) == []


def test_missing_root_is_recreated_with_sentinel(id_factory) -> None:
    created = _build("docs", (), id_factory)

    assert created[0] == create_root()
    assert created[1].path == "app/docs"
    assert created[1].parent_id == "root"


def test_ids_come_from_the_factory(root_only, id_factory) -> None:
    created = _build("p/q/r", root_only, id_factory)
    assert [n.id for n in created] == ["n1", "n2", "n3"]
