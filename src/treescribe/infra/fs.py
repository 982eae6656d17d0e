from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the OS-specific locations where TreeScribe keeps its settings,
logs and workspace snapshot, and provides small write helpers shared by
the persistence modules.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeScribe"
UNIX_APP_DIR_NAME = ".treescribe"
WORKSPACE_SUBDIR = "workspace"
LOGS_SUBDIR = "logs"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeScribe
    - Linux/Mac: ~/.treescribe

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    safe_mkdir(path)
    return os.path.abspath(path)


def get_workspace_dir(base_dir: Optional[str] = None) -> str:
    """Directory holding the tree snapshot and the scratch text."""
    return os.path.join(base_dir or get_user_data_dir(), WORKSPACE_SUBDIR)


def get_default_log_path(file_name: str = "treescribe.log") -> str:
    return os.path.join(get_user_data_dir(), LOGS_SUBDIR, file_name)

# -----------------------------------------------------------------------------
# WRITE HELPERS
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def write_text_file(path: str, text: str) -> None:
    """
    Write a UTF-8 text file verbatim, creating its folder if needed.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
