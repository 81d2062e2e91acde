"""Substring/suffix ignore rules for the directory walker.

Patterns are free-form strings compared case-insensitively against
separator-normalized paths:

- a pattern containing ``/`` matches anywhere inside the full path
- a bare pattern matches a *file* name exactly or as a suffix

Directories only honor the first rule, so ``obj`` leaves an ``obj`` folder
visible while ``/obj`` hides it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".bmp",
    ".tif",
    ".tiff",
    ".webp",
    ".svg",
    ".ico",
    ".woff2",
    "/.git",
    "/obj",
    "/bin",
    "/node_modules",
    ".github",
    "/.next",
    "package-lock.json",
)


def normalize_path_text(value: str | Path) -> str:
    """Lowercase ``value`` and fold backslashes into forward slashes."""
    return str(value).replace("\\", "/").lower()


def parse_pattern_lines(text: str) -> list[str]:
    """Split multi-line editor text into trimmed, non-blank patterns."""
    return [line.strip() for line in text.splitlines() if line.strip()]


@dataclass(frozen=True)
class IgnoreMatcher:
    """Normalized pattern snapshot split into path and name rules."""

    path_patterns: tuple[str, ...]
    name_patterns: tuple[str, ...]

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> IgnoreMatcher:
        path_patterns: list[str] = []
        name_patterns: list[str] = []
        for raw in patterns:
            pattern = normalize_path_text(raw.strip())
            if not pattern:
                continue
            if "/" in pattern:
                path_patterns.append(pattern)
            else:
                name_patterns.append(pattern)
        return cls(tuple(path_patterns), tuple(name_patterns))

    def matching_pattern(self, path: Path, is_dir: bool) -> str | None:
        """Return the first (normalized) pattern excluding ``path``, if any."""
        full = normalize_path_text(path)
        for pattern in self.path_patterns:
            if pattern in full:
                return pattern
        if is_dir:
            return None
        name = path.name.lower()
        for pattern in self.name_patterns:
            if name == pattern or name.endswith(pattern):
                return pattern
        return None

    def is_ignored(self, path: Path, is_dir: bool) -> bool:
        pattern = self.matching_pattern(path, is_dir)
        if pattern is not None:
            logger.debug("ignoring %s (pattern %r)", path, pattern)
            return True
        return False


def default_matcher() -> IgnoreMatcher:
    return IgnoreMatcher.from_patterns(DEFAULT_IGNORE_PATTERNS)


__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "IgnoreMatcher",
    "default_matcher",
    "normalize_path_text",
    "parse_pattern_lines",
]
