from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Log lines look like ``DEBUG run label=... pid=...`` / ``ERROR config: ...``.

The report stream ("<label> : <counter>") shares stdout with the logger, so the
default level is WARNING and only ``--debug`` makes the harness chatty.
"""

__all__ = [
    "setup_logging",
    "get_logger",
    "enable_debug",
    "reset_logging",
]

LOGGER_NAME = "onesecond"

# Global logger instance
_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter that prefixes each message with a short level label."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Setup the harness logger.

    Idempotent: a second call returns the already configured logger untouched.

    Args:
        level: Initial level for both logger and handler

    Returns:
        Configured logger instance for the application
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers to avoid duplication
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the configured application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def enable_debug() -> None:
    """Lower the logger and all of its handlers to DEBUG."""
    logger = get_logger()
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
    logger.setLevel(logging.DEBUG)
    logger.debug("debug mode enabled")


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
