"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, json: bool = False):
    """Console sink plus an optional daily file sink (JSON lines when json=True)."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if not to_file:
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    suffix = "jsonl" if json else "log"
    logger.add(
        LOG_DIR / f"elections_{{time:YYYY-MM-DD}}.{suffix}",
        format=FILE_FORMAT,
        level="DEBUG",
        serialize=json,
        rotation="00:00",
        retention="14 days",
        compression="gz",
        enqueue=True,
    )
    logger.debug("File logging enabled in {}", LOG_DIR)
    return logger
