from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line is written as "<LABEL> <message>" with LABEL one of
INFO|WARN|ERROR|SUMMARY. Output goes to stderr so stdout stays reserved for
the parsed cart JSON.

Module loggers created with logging.getLogger(__name__) inside the package
are children of the application logger and share its handler.
"""

__all__ = [
    "APP_LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "get_logger",
    "log_summary",
    "reset_logging",
]

APP_LOGGER_NAME = "cart_parser"

# SUMMARY sits between INFO=20 and WARNING=30
SUMMARY_LEVEL = 25

# Set by setup_logging(), cleared by reset_logging()
_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Render records as "<LABEL> <message>" (WARNING is shortened to WARN)."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging() -> logging.Logger:
    """Attach the labeled stderr handler to the `cart_parser` logger.

    Validation errors from the pipeline (ERROR), progress lines from the CLI
    (INFO) and the final cart SUMMARY all flow through this one handler.
    Calling it again reuses the configured logger; the CLI calls it on every
    main() run and tests call it after reset_logging().
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(logging.INFO)

    # A logger left over from a previous reset may still hold a handler bound
    # to an old stderr object.
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.INFO)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    # Each cart error is printed once, by this handler only
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    """Emit the one-line run result, e.g. "items=5 total=348.32"."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Forget the configured logger so the next setup rebinds to the current sys.stderr."""
    global _logger
    _logger = None
