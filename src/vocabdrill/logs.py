"""Logging setup."""

from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr so stdout stays free for the drill itself."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<level>{message}</level>",
    )
