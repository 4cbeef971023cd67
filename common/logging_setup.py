"""Structured logging setup for the SoloForge shell."""

import logging
import sys
from typing import List, Optional


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Set up structured logging for the application.

    The shell owns the whole screen, so records go to the log file when one
    is given and to stderr otherwise.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to
    """
    log_format = (
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    )
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers: List[logging.Handler]
    if log_file:
        handlers = [logging.FileHandler(log_file)]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Module logger; handlers and level come from setup_logging on the root."""
    return logging.getLogger(name)
