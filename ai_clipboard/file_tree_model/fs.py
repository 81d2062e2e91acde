"""Filesystem scanning and checkbox-tree construction."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..classify import Classification, classify_file
from ..ignore import IgnoreMatcher
from .types import ScanError, TreeNode, WalkResult

logger = logging.getLogger(__name__)

AUTO_EXPAND_MAX_SUBDIRS = 10


@dataclass(frozen=True)
class DirectoryChild:
    """One raw directory entry observed by ``os.scandir``."""

    name: str
    path: Path
    is_dir: bool
    is_symlink: bool = False


def root_display_name(root: Path) -> str:
    """Return the last path component, or the whole path for ``/`` or ``C:\\``."""
    return root.name or str(root)


def list_directory_children(
    directory: Path,
) -> tuple[list[DirectoryChild], list[DirectoryChild], Exception | None]:
    """List ``directory`` as ``(subdirs, files, scan_error)``.

    Both lists are sorted case-insensitively by name. ``scan_error`` is set,
    and both lists are empty, when the directory cannot be enumerated.
    """
    subdirs: list[DirectoryChild] = []
    files: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    is_symlink = entry.is_symlink()
                    is_dir = entry.is_dir()
                except OSError:
                    is_symlink = False
                    is_dir = False
                child = DirectoryChild(
                    name=entry.name,
                    path=Path(entry.path),
                    is_dir=is_dir,
                    is_symlink=is_symlink,
                )
                (subdirs if is_dir else files).append(child)
    except OSError as exc:
        return [], [], exc

    subdirs.sort(key=lambda item: item.name.lower())
    files.sort(key=lambda item: item.name.lower())
    return subdirs, files, None


def build_file_tree(
    root: Path,
    matcher: IgnoreMatcher,
    include_binaries: bool = False,
    classify: Callable[[Path], Classification] = classify_file,
) -> WalkResult:
    """Walk ``root`` into a filtered ``TreeNode`` tree.

    Subdirectories are visited before files, depth first. Ignored
    directories are never entered. Files are dropped when ignored, or when
    ``include_binaries`` is off and ``classify`` reports binary content.
    Directories that cannot be listed contribute no children and are
    reported in ``WalkResult.errors``. The root itself is never filtered.
    """
    try:
        root = root.resolve()
    except OSError:
        pass
    errors: list[ScanError] = []

    def build_directory(directory: Path, name: str, follow: bool = True) -> TreeNode:
        node = TreeNode(name=name, path=directory, is_dir=True)
        if not follow:
            return node
        subdirs, files, scan_error = list_directory_children(directory)
        if scan_error is not None:
            logger.debug("could not list %s: %s", directory, scan_error)
            errors.append(ScanError(directory, scan_error))
            return node

        for child in subdirs:
            if matcher.is_ignored(child.path, is_dir=True):
                continue
            node.children.append(build_directory(child.path, child.name, follow=not child.is_symlink))
        node.expanded = len(subdirs) <= AUTO_EXPAND_MAX_SUBDIRS

        for child in files:
            if matcher.is_ignored(child.path, is_dir=False):
                continue
            if not include_binaries and not classify(child.path).is_text:
                logger.debug("skipping binary %s", child.path)
                continue
            node.children.append(TreeNode(name=child.name, path=child.path, is_dir=False))
        return node

    tree = build_directory(root, root_display_name(root))
    return WalkResult(tree=tree, errors=tuple(errors))


__all__ = [
    "AUTO_EXPAND_MAX_SUBDIRS",
    "DirectoryChild",
    "build_file_tree",
    "list_directory_children",
    "root_display_name",
]
