"""Domain model for the checkbox file tree.

This package contains non-UI tree primitives:
- the mutable ``TreeNode`` with owned children
- filesystem scanning that applies ignore rules and the text classifier
"""

from __future__ import annotations

from .types import ScanError, TreeNode, WalkResult
from .fs import (
    AUTO_EXPAND_MAX_SUBDIRS,
    DirectoryChild,
    build_file_tree,
    list_directory_children,
    root_display_name,
)

__all__ = [
    "TreeNode",
    "ScanError",
    "WalkResult",
    "AUTO_EXPAND_MAX_SUBDIRS",
    "DirectoryChild",
    "build_file_tree",
    "list_directory_children",
    "root_display_name",
]
