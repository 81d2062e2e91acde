"""System clipboard writer."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)


def clipboard_commands() -> list[list[str]]:
    """Return candidate clipboard commands for the current platform."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def copy_text_to_clipboard(text: str) -> bool:
    """Best-effort clipboard copy across macOS, Windows, and common Linux tools."""
    if not text:
        return False

    for command in clipboard_commands():
        if shutil.which(command[0]) is None:
            continue
        try:
            proc = subprocess.run(
                command,
                input=text,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("clipboard command %s failed: %s", command[0], exc)
            continue
        if proc.returncode == 0:
            return True
    logger.warning("no working clipboard command found")
    return False


__all__ = ["clipboard_commands", "copy_text_to_clipboard"]
