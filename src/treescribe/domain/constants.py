from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed identifiers of the virtual tree (root sentinel,
separator, indentation unit) together with application versioning.
"""

APP_NAME = "TreeScribe"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# VIRTUAL TREE
# -----------------------------------------------------------------------------

ROOT_ID = "root"
ROOT_NAME = "app"
PATH_SEPARATOR = "/"

# Marker that turns the trailing segment of a path into a file
FILE_EXTENSION_MARKER = "."

# Two spaces per depth level in the structured text export
INDENT_UNIT = "  "
