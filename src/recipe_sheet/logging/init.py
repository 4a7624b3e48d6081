from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line is rendered as ``LABEL [Recipes] message`` where LABEL is one of
INFO|WARN|ERROR|SUMMARY (plus DEBUG/CRITICAL). Standard logging only.

Modules log through ``logging.getLogger(__name__)``; those loggers live under
the ``recipe_sheet`` package logger configured here, so one handler covers the
whole package. Output goes to stderr, stdout is reserved for CLI JSON.
"""

__all__ = [
    "LOG_TAG",
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "log_summary",
    "reset_logging",
    "setup_logging",
]

LOGGER_NAME = "recipe_sheet"
LOG_TAG = "[Recipes]"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

# Global logger instance
_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter adding the level label and the fixed tag to each message."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def __init__(self, tag: str = LOG_TAG) -> None:
        super().__init__()
        self.tag = tag

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        line = f"{level_label} {self.tag} {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger (idempotent).

    Returns:
        The ``recipe_sheet`` logger with a single stderr handler
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers to avoid duplication
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False

    _logger = logger
    return logger


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    logging.getLogger(LOGGER_NAME).log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _logger = None
