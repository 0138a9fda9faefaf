"""loguru sink configuration for command-line runs"""

import sys

from loguru import logger


def setup_logger(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a single stderr sink at level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> | {name}:{function} - {message}")
