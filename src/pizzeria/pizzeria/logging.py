"""Loguru sinks for the pizzeria CLI.

The CLI calls setup_logging() before loading an order book. Library code
logs through `from loguru import logger` and never adds sinks itself.
"""

import sys
from pathlib import Path

from loguru import logger

# src/pizzeria/pizzeria/logging.py -> <project root>/logs
LOG_FILE = Path(__file__).resolve().parents[3] / "logs" / "pizzeria.log"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> <level>{level: <7}</level> "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} {level: <7} {name}:{line} | {message}"


def setup_logging(level: str = "INFO", log_to_file: bool = False) -> None:
    """Replace loguru's default handler with the pizzeria sinks.

    Args:
        level: Minimum level for every sink.
        log_to_file: Also keep a daily-rotated log under logs/.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if log_to_file:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_FILE,
            level=level,
            format=FILE_FORMAT,
            rotation="00:00",
            retention="7 days",
        )
