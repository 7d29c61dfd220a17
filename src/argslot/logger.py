"""Logging configuration for argslot using loguru.

argslot is a library, so its records are disabled on import and no sink is
touched. ``setup_logger`` (called by the CLI, or at import when one of the
``ARGSLOT_LOG_*`` variables is set) enables them.
"""

import os
import sys
from loguru import logger
from typing import Optional

from argslot.utils import env_flag

# Store the configured log file path to ensure consistency
_log_file_path: Optional[str] = None

# Sinks added by setup_logger, removed again on reconfiguration
_handler_ids: list[int] = []


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "WARNING",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
    exclusive: bool = False,
) -> None:
    """
    Configure loguru logger with console and file output and enable argslot records.

    Args:
        log_file: Path to the log file (if None, the previously configured path is reused;
            no file sink is added when nothing was ever configured)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to console
        exclusive: Remove every existing sink, loguru's default one included.
            Only applications owning the process (the argslot CLI) should set this.
    """
    global _log_file_path

    if log_file is None:
        log_file = _log_file_path
    else:
        # Relative paths are resolved against the working directory
        log_file = os.path.abspath(log_file)
        _log_file_path = log_file

    if exclusive:
        logger.remove()
    else:
        for handler_id in _handler_ids:
            try:
                logger.remove(handler_id)
            except ValueError:
                # already removed by someone else
                pass
    _handler_ids.clear()

    # Console output with colors
    if console_output:
        _handler_ids.append(
            logger.add(
                sys.stderr,
                level=log_level,
                format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
                colorize=True,
                filter="argslot",
            )
        )

    # File output
    if log_file:
        _handler_ids.append(
            logger.add(
                log_file,
                level=log_level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
                rotation=rotation,
                retention=retention,
                compression=compression,
                encoding="utf-8",
                filter="argslot",
            )
        )

    logger.enable("argslot")


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger


logger.disable("argslot")

if os.getenv("ARGSLOT_LOG_FILE") or env_flag("ARGSLOT_LOG_CONSOLE"):
    setup_logger(
        log_file=os.getenv("ARGSLOT_LOG_FILE") or None,
        log_level=os.getenv("ARGSLOT_LOG_LEVEL", "WARNING").upper(),
        console_output=env_flag("ARGSLOT_LOG_CONSOLE"),
    )
