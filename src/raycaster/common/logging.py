"""Logging setup for scripts built on the package.

Library modules only call ``logging.getLogger(__name__)`` and never install
handlers. Entry points call ``setup_default_logging`` once to get readable
output when the application has not configured logging itself.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a minimal logging configuration once.

    Does nothing if the root logger already has handlers.

    Args:
        level: Level name (e.g. "DEBUG") or numeric level.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=lvl, format=DEFAULT_FORMAT)


__all__ = ["setup_default_logging"]
