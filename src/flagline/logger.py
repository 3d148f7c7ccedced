"""Logging configuration for flagline using loguru."""

import os
import sys
from typing import Optional

from loguru import logger


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """
    Configure loguru for flagline and enable the package's log records.

    Importing flagline leaves its logging disabled; applications call this
    once to opt in.

    Args:
        log_file: Path to the log file (no file output when None)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to stderr
    """
    # Remove default handler
    logger.remove()

    # Console output with colors
    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            filter="flagline",
            colorize=True,
        )

    # File output
    if log_file:
        logger.add(
            os.path.abspath(log_file),
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
            filter="flagline",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )

    logger.enable("flagline")


def get_logger(name: Optional[str] = None):
    """
    Get a logger bound to a flagline component name.

    Args:
        name: Optional component name, shown in place of the module name

    Returns:
        Logger instance
    """
    return logger.bind(name=name or "flagline")
