"""Build the clipboard payload for checked files.

Each readable file becomes::

    ### START <display path>
    <file contents>
    ### END <display path>

followed by a blank line. Unreadable files contribute one
``Error reading ...`` line and the export carries on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .file_tree_model import TreeNode, root_display_name
from .selection import checked_file_paths

logger = logging.getLogger(__name__)

START_MARKER = "### START"
END_MARKER = "### END"

FEEDBACK_COPIED = "Files copied!"
FEEDBACK_NONE = "No files copied."
FEEDBACK_SECONDS = 2.0


@dataclass(frozen=True)
class ExportError:
    path: Path
    error: Exception


@dataclass(frozen=True)
class ExportResult:
    """Combined payload plus the count of files that were actually read."""

    text: str
    file_count: int
    errors: tuple[ExportError, ...] = ()

    @property
    def feedback(self) -> str:
        return FEEDBACK_COPIED if self.file_count > 0 else FEEDBACK_NONE


def read_text(path: Path) -> str:
    """Return the literal text of ``path``.

    Line endings are kept as stored. A UTF-8 BOM is stripped; bytes that are
    not valid UTF-8 are decoded as latin-1.
    """
    data = path.read_bytes()
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def display_path(root: Path, file_path: Path) -> str:
    """Label ``file_path`` as ``<root name>/<path relative to root>``."""
    try:
        relative = file_path.relative_to(root)
    except ValueError:
        relative = file_path
    return str(Path(root_display_name(root)) / relative)


def render_block(label: str, contents: str) -> str:
    return f"{START_MARKER} {label}\n{contents}\n{END_MARKER} {label}\n\n"


def render_read_error(path: Path, error: Exception) -> str:
    message = getattr(error, "strerror", None) or str(error)
    return f"Error reading {path}: {message}\n"


def build_export(
    tree: TreeNode | None,
    root: Path | None,
    read: Callable[[Path], str] = read_text,
) -> ExportResult:
    """Concatenate every checked, still-existing file under ``tree``."""
    if tree is None or root is None:
        return ExportResult(text="", file_count=0)

    parts: list[str] = []
    errors: list[ExportError] = []
    file_count = 0
    for path in checked_file_paths(tree):
        try:
            contents = read(path)
        except (OSError, ValueError) as exc:
            logger.debug("could not read %s: %s", path, exc)
            errors.append(ExportError(path, exc))
            parts.append(render_read_error(path, exc))
            continue
        parts.append(render_block(display_path(root, path), contents))
        file_count += 1
    return ExportResult(text="".join(parts), file_count=file_count, errors=tuple(errors))


__all__ = [
    "END_MARKER",
    "ExportError",
    "ExportResult",
    "FEEDBACK_COPIED",
    "FEEDBACK_NONE",
    "FEEDBACK_SECONDS",
    "START_MARKER",
    "build_export",
    "display_path",
    "read_text",
    "render_block",
    "render_read_error",
]
