"""Domain datatypes for the checkbox file tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class TreeNode:
    """One folder or file row; each node owns its children outright."""

    name: str
    path: Path
    is_dir: bool
    checked: bool = False
    expanded: bool = False
    children: list["TreeNode"] = field(default_factory=list)

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Yield this node and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def iter_files(self) -> Iterator["TreeNode"]:
        for node in self.iter_nodes():
            if not node.is_dir:
                yield node

    def find(self, path: Path) -> "TreeNode | None":
        """Return the node whose path equals ``path``, or ``None``."""
        for node in self.iter_nodes():
            if node.path == path:
                return node
        return None


@dataclass(frozen=True)
class ScanError:
    """Directory that could not be enumerated while walking."""

    path: Path
    error: Exception


@dataclass(frozen=True)
class WalkResult:
    tree: TreeNode
    errors: tuple[ScanError, ...] = ()


__all__ = [
    "ScanError",
    "TreeNode",
    "WalkResult",
]
