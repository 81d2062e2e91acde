"""Explicit application state shared by commands and front ends.

Holds the loaded tree, the user config, and the transient status message
shown after a copy.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from .config import UserConfig
from .export import FEEDBACK_SECONDS
from .file_tree_model import ScanError, TreeNode


@dataclass
class AppState:
    config: UserConfig = field(default_factory=UserConfig)
    root: Path | None = None
    tree: TreeNode | None = None
    scan_errors: tuple[ScanError, ...] = ()
    status_message: str = ""
    status_message_until: float = 0.0


def clear_status_message(state: AppState) -> None:
    """Clear transient status message and its expiration timestamp."""
    state.status_message = ""
    state.status_message_until = 0.0


def set_status_message(state: AppState, message: str, now: float | None = None) -> None:
    """Set transient status message visible for a fixed short interval."""
    if now is None:
        now = time.monotonic()
    state.status_message = message
    state.status_message_until = now + FEEDBACK_SECONDS


def current_status(state: AppState, default: str, now: float | None = None) -> str:
    """Return the live status message, or ``default`` once it has expired."""
    if not state.status_message:
        return default
    if now is None:
        now = time.monotonic()
    if now >= state.status_message_until:
        clear_status_message(state)
        return default
    return state.status_message
