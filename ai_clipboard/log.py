"""Console logging setup for the CLI and GUI entrypoints."""

from __future__ import annotations

import logging

LOGGER_NAME = "ai_clipboard"
LOG_FORMAT = "[%(levelname)s] %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach one stderr handler to the package logger.

    Repeated calls only adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(getattr(handler, "_ai_clipboard", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._ai_clipboard = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
