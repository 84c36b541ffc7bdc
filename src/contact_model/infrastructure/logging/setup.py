"""Logging setup built on loguru."""

from pathlib import Path
from typing import Optional
import sys

from loguru import logger

from contact_model.utils.paths import get_log_dir


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    console_output: bool = True,
    json_output: bool = False,
):
    """Setup package logging.

    Args:
        log_level: Logging level
        log_file: Optional log file path, relative names go under the log dir
        console_output: Whether to log to stderr
        json_output: Whether the file sink writes JSON lines

    Returns:
        Configured logger instance
    """
    # Remove default handler
    logger.remove()
    logger.configure(extra={"name": "contact_model"})

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level.upper(),
            format=CONSOLE_FORMAT,
        )

    if log_file:
        if not log_file.is_absolute():
            log_file = get_log_dir() / log_file
        log_file.parent.mkdir(parents=True, exist_ok=True)

        if json_output:
            logger.add(
                log_file,
                level=log_level.upper(),
                format="{message}",
                serialize=True
            )
        else:
            logger.add(
                log_file,
                level=log_level.upper(),
                rotation="10 MB",
                retention="7 days",
                compression="zip"
            )

    logger.debug(f"Logging initialized at level {log_level.upper()}")
    return logger


def get_logger(name: str):
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logger.bind(name=name)
