"""Utilities: logging, decorators."""

from step_align.utils.logging import setup_logging, get_logger
from step_align.utils.decorators import timed, logged

__all__ = [
    "setup_logging",
    "get_logger",
    "timed",
    "logged",
]
