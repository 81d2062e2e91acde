"""Byte-sampling text/binary classifier.

Only the first ``SAMPLE_BYTES`` bytes are inspected. Any NUL byte marks the
file binary; otherwise the share of bytes outside printable ASCII plus
tab/LF/CR must stay at or below ``MAX_NON_TEXT_RATIO``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SAMPLE_BYTES = 1024
MAX_NON_TEXT_RATIO = 0.20

_TEXT_BYTES = frozenset(range(32, 127)) | {9, 10, 13}


@dataclass(frozen=True)
class Classification:
    """Outcome of sampling one file; ``error`` is set when sampling failed."""

    is_text: bool
    error: Exception | None = None


def classify_bytes(sample: bytes) -> bool:
    """Return ``True`` when ``sample`` looks like text."""
    if not sample:
        return True
    if b"\x00" in sample:
        return False
    non_text = sum(1 for byte in sample if byte not in _TEXT_BYTES)
    return non_text / len(sample) <= MAX_NON_TEXT_RATIO


def classify_file(path: Path) -> Classification:
    """Sample ``path`` and classify it, failing closed on I/O errors."""
    try:
        with path.open("rb") as handle:
            sample = handle.read(SAMPLE_BYTES)
    except OSError as exc:
        logger.debug("could not sample %s: %s", path, exc)
        return Classification(is_text=False, error=exc)
    return Classification(is_text=classify_bytes(sample))


def is_text_file(path: Path) -> bool:
    return classify_file(path).is_text


__all__ = [
    "Classification",
    "MAX_NON_TEXT_RATIO",
    "SAMPLE_BYTES",
    "classify_bytes",
    "classify_file",
    "is_text_file",
]
