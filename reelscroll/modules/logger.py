# Logging setup for reelscroll
# The TUI owns the terminal, so the stderr sink is only used by the one-shot CLI.

import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    console: bool = False,
) -> None:
    """
    Replace loguru's default sink.

    Args:
        log_file: Append logs to this file (rotated at 5 MB)
        level: Minimum level for every sink
        console: Also log to stderr
    """
    logger.remove()
    if console:
        logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_file:
        logger.add(log_file, level=level, format=LOG_FORMAT, rotation="5 MB", encoding="utf-8")
