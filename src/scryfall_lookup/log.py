"""
Logging helpers for the Scryfall lookup client.

The client only emits records through loguru; configuring sinks is left to the
application embedding it.
"""

import sys
from typing import Optional

from loguru import logger

from .config import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> - <level>{message}</level>"
)


def setup_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default sink with a compact stderr sink.

    Args:
        level: Minimum level to emit, defaults to LOG_LEVEL from config
    """
    logger.remove()
    logger.configure(extra={"module": "-"})
    logger.add(
        sys.stderr,
        level=level or LOG_LEVEL,
        format=LOG_FORMAT,
        colorize=True,
    )


def get_logger(name: str):
    """Get a logger bound to a module name.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Fetching card: {}", card_id)
    """
    return logger.bind(module=name)
