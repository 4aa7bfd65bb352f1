"""Logging configuration."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
FormatStyle = Literal["simple", "detailed"]

_configured = False


def setup_logging(level: LogLevel = "INFO", format_style: FormatStyle = "simple") -> None:
    """Configure logging for the application.

    Only the first call has an effect; later calls are ignored.

    Args:
        level: Log level
        format_style: 'simple' for terminals, 'detailed' for log collection
    """
    global _configured

    if _configured:
        return

    if format_style == "simple":
        fmt = "%(levelname)s | %(name)s | %(message)s"
    else:
        fmt = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"

    logging.basicConfig(
        level=getattr(logging, level),
        format=fmt,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for ``__name__``)."""
    return logging.getLogger(name)
