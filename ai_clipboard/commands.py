"""User actions as plain functions over ``AppState``.

Every UI event maps to one entry in ``COMMANDS``; widgets only translate
clicks into ``dispatch`` calls and re-render from the resulting state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .export import ExportResult, build_export
from .file_tree_model import build_file_tree
from .ignore import IgnoreMatcher, parse_pattern_lines
from .selection import checked_file_paths, restore_checked, set_all, set_checked
from .state import AppState, set_status_message

logger = logging.getLogger(__name__)

CLIPBOARD_UNAVAILABLE = "Clipboard unavailable."


@dataclass(frozen=True)
class CommandResult:
    changed: bool
    message: str | None = None
    export: ExportResult | None = None


def matcher_for(state: AppState) -> IgnoreMatcher:
    return IgnoreMatcher.from_patterns(state.config.effective_ignore_patterns())


def _load_tree(state: AppState, root: Path) -> None:
    result = build_file_tree(
        root,
        matcher_for(state),
        include_binaries=state.config.include_binaries,
    )
    state.root = result.tree.path
    state.tree = result.tree
    state.scan_errors = result.errors
    if result.errors:
        logger.info("%d director(ies) under %s could not be read", len(result.errors), root)


def open_folder(state: AppState, path: Path) -> CommandResult:
    """Load ``path`` as the new root and record it in project history."""
    if not path.is_dir():
        return CommandResult(False, f"Folder not found: {path}")
    _load_tree(state, path)
    root_text = str(state.root)
    state.config.last_folder = root_text
    state.config.remember_project(root_text)
    logger.info("opened %s", root_text)
    return CommandResult(True)


def refresh(state: AppState) -> CommandResult:
    """Rebuild the tree for the current root, keeping checked paths."""
    if state.root is None:
        return CommandResult(False)
    checked = [str(node.path) for node in state.tree.iter_nodes() if node.checked] if state.tree else []
    _load_tree(state, state.root)
    restore_checked(state.tree, checked)
    return CommandResult(True)


def toggle(state: AppState, path: Path, checked: bool) -> CommandResult:
    """User checkbox change on ``path``; cascades to descendants."""
    if state.tree is None:
        return CommandResult(False)
    node = state.tree.find(path)
    if node is None:
        return CommandResult(False)
    set_checked(node, checked)
    return CommandResult(True)


def select_all(state: AppState) -> CommandResult:
    set_all(state.tree, True)
    return CommandResult(state.tree is not None)


def reset_selection(state: AppState) -> CommandResult:
    set_all(state.tree, False)
    return CommandResult(state.tree is not None)


def copy_selected(state: AppState, write_clipboard: Callable[[str], bool]) -> CommandResult:
    """Export checked files and hand the payload to ``write_clipboard``.

    The clipboard is left untouched when no file could be exported.
    """
    export = build_export(state.tree, state.root)
    message = export.feedback
    if export.file_count > 0 and not write_clipboard(export.text):
        message = CLIPBOARD_UNAVAILABLE
    set_status_message(state, message)
    return CommandResult(export.file_count > 0, message, export)


def apply_options(state: AppState, include_binaries: bool, ignore_text: str) -> CommandResult:
    """Store options-dialog values and reload the tree with them."""
    state.config.include_binaries = bool(include_binaries)
    state.config.ignore_patterns = parse_pattern_lines(ignore_text)
    refresh(state)
    return CommandResult(True)


def restore_session(state: AppState) -> CommandResult:
    """Reopen the last folder and re-mark saved checks without cascading."""
    last_folder = state.config.last_folder
    if not last_folder or not Path(last_folder).is_dir():
        return CommandResult(False)
    _load_tree(state, Path(last_folder))
    restored = restore_checked(state.tree, state.config.checked_files)
    logger.debug("restored %d checked path(s)", restored)
    return CommandResult(True)


def snapshot_config(state: AppState) -> CommandResult:
    """Copy the current root and checked files into ``state.config``."""
    state.config.last_folder = str(state.root) if state.root is not None else None
    state.config.checked_files = [str(path) for path in checked_file_paths(state.tree)]
    return CommandResult(True)


class CommandRegistry:
    """Small action-name dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[..., CommandResult]] = {}

    def register(self, name: str, handler: Callable[..., CommandResult]) -> CommandRegistry:
        self._handlers[name] = handler
        return self

    def names(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def dispatch(self, state: AppState, name: str, *args: object) -> CommandResult:
        handler = self._handlers.get(name)
        if handler is None:
            raise KeyError(f"unknown command: {name}")
        return handler(state, *args)


COMMANDS = (
    CommandRegistry()
    .register("open_folder", open_folder)
    .register("refresh", refresh)
    .register("toggle", toggle)
    .register("select_all", select_all)
    .register("reset", reset_selection)
    .register("copy", copy_selected)
    .register("apply_options", apply_options)
    .register("restore_session", restore_session)
    .register("snapshot_config", snapshot_config)
)


def dispatch(state: AppState, name: str, *args: object) -> CommandResult:
    return COMMANDS.dispatch(state, name, *args)


__all__ = [
    "CLIPBOARD_UNAVAILABLE",
    "COMMANDS",
    "CommandRegistry",
    "CommandResult",
    "apply_options",
    "copy_selected",
    "dispatch",
    "matcher_for",
    "open_folder",
    "refresh",
    "reset_selection",
    "restore_session",
    "select_all",
    "snapshot_config",
    "toggle",
]
