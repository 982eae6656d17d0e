from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   an editable install.
2. Provides deterministic id factories and prebuilt snapshots shared by
   the tree tests.
"""

import itertools
import os
import sys
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treescribe.domain.tree_models import Node, TreeSnapshot, create_root  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Counter-based ids ('n1', 'n2', ...) so assertions can name nodes."""
    counter = itertools.count(1)
    return lambda: f"n{next(counter)}"


@pytest.fixture
def root_only() -> TreeSnapshot:
    return (create_root(),)


@pytest.fixture
def sample_tree() -> TreeSnapshot:
    """
    Small hand-built snapshot.

    app
      a
        b.txt  (content "hello")
      c.txt
    """
    return (
        create_root(),
        Node(id="a", name="a", is_file=False, parent_id="root", path="app/a", is_open=True),
        Node(id="b", name="b.txt", is_file=True, parent_id="a", path="app/a/b.txt", content="hello"),
        Node(id="c", name="c.txt", is_file=True, parent_id="root", path="app/c.txt", content=""),
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "gui: controller tests driven through a mocked view")
