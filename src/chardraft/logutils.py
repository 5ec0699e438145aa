"""
Logging helpers for chardraft.
"""

import logging

logger = logging.getLogger("chardraft")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure root logging for applications embedding the engine.

    Args:
        level: Level name (e.g. "DEBUG") or numeric logging level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level)
    logger.setLevel(level)
    logger.debug(f"📝 Logging configured at level {logging.getLevelName(level)}")
