import os
from pathlib import Path
from typing import Generator

from loguru import logger

__all__ = [
    "ROOT",
    "logger",
    "configure_logging",
]

# Get the project root directory relative to this file
ROOT = Path(__file__).parent.parent.resolve()

# Remove Loguru's default stdout sink; stdout may carry the protocol stream
logger.remove()

log_format = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS zz}</green> | <level>{level: <8}</level> | <yellow>Line {line: >4} ({file}):</yellow> <b>{message}</b>"


def configure_logging(log_dir: str = ".watcher", level: str = "DEBUG") -> Generator[list[int], None, None]:
    """Attach the debug and info file sinks for the lifetime of the resource.

    Args:
        log_dir: Directory the log files are written to
        level: Minimum level for the debug sink

    Yields:
        Loguru handler ids of the added sinks
    """
    os.makedirs(log_dir, exist_ok=True)

    handler_ids = [
        logger.add(
            os.path.join(log_dir, "debug.log"),
            level=level,
            format=log_format,
            colorize=False,
            backtrace=True,
            diagnose=True,
        ),
        logger.add(
            os.path.join(log_dir, "info.log"),
            level="INFO",
            format=log_format,
            colorize=False,
            backtrace=True,
            diagnose=True,
        ),
    ]
    try:
        yield handler_ids
    finally:
        for handler_id in handler_ids:
            logger.remove(handler_id)
