"""Checkbox state operations over a ``TreeNode`` tree.

User toggles cascade down to every descendant. Restoring a saved selection
is programmatic and marks only the listed paths, so a partially checked
folder stays partially checked.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .file_tree_model import TreeNode


def set_checked(node: TreeNode, checked: bool) -> None:
    """Apply a user toggle to ``node`` and all of its descendants."""
    node.checked = checked
    for child in node.children:
        set_checked(child, checked)


def set_all(tree: TreeNode | None, checked: bool) -> None:
    """Select All / Reset: force every node in ``tree`` to ``checked``."""
    if tree is None:
        return
    set_checked(tree, checked)


def restore_checked(tree: TreeNode | None, paths: Iterable[str]) -> int:
    """Mark nodes whose path string is in ``paths``; return how many matched."""
    if tree is None:
        return 0
    wanted = set(paths)
    restored = 0
    for node in tree.iter_nodes():
        if str(node.path) in wanted:
            node.checked = True
            restored += 1
    return restored


def checked_file_paths(tree: TreeNode | None, require_exists: bool = True) -> list[Path]:
    """Return checked file paths in document order.

    With ``require_exists`` each path is re-checked on disk so files removed
    since the tree was built are skipped.
    """
    if tree is None:
        return []
    out: list[Path] = []
    for node in tree.iter_files():
        if not node.checked:
            continue
        if require_exists and not node.path.is_file():
            continue
        out.append(node.path)
    return out


__all__ = [
    "checked_file_paths",
    "restore_checked",
    "set_all",
    "set_checked",
]
