from __future__ import annotations

"""
TreeScribe.

Desktop tool for sketching a virtual folder/file tree from slash-delimited
paths, attaching text to files and exporting the tree as indented text.
"""

__version__ = "1.0.0"
