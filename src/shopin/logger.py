"""Simple logging abstraction for shopin."""

import sys
from typing import Optional

from loguru import logger as _logger

from .profile import Profile

_logger_configured: bool = False


def get_logger(component: Optional[str] = None):
    """Get a logger instance bound to a component name."""
    global _logger_configured

    # Configure logger on first use
    if not _logger_configured:
        _logger.remove()

        profile = Profile.current()

        # Stderr handler - only ERROR and above
        _logger.add(
            sys.stderr,
            level="ERROR",
            format="<red>{time:HH:mm:ss}</red> | <level>{level: <8}</level> | <cyan>{extra[app]}</cyan> | <level>{message}</level>",
            colorize=True,
        )

        # File handler - all logs (DEBUG and above)
        _logger.add(
            profile.log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[app]} | {message}",
            rotation="10 MB",
            retention="30 days",
        )

        _logger.configure(patcher=_add_context)
        _logger_configured = True

    if component:
        return _logger.bind(component=component)
    return _logger


def _add_context(record):
    """Add the qualified component name to the log record."""
    component = record["extra"].get("component")
    record["extra"]["app"] = f"shopin.{component}" if component else "shopin"


logger = get_logger()

__all__ = [
    "logger",
    "get_logger",
]
