"""Logging setup for Resume Tailor.

All package modules log through ``logging.getLogger(__name__)``, so every
logger lives under the ``resume_tailor`` namespace configured here.
"""

import logging
import sys

LOGGER_NAME = "resume_tailor"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries that log every request at INFO; kept at WARNING unless debugging.
NOISY_LOGGERS = ("httpx", "httpcore", "LiteLLM", "litellm")

_configured = False


def configure_logging(
    level: str | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Configure and return the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to INFO.
        format_string: Format string for log records.
        date_format: Format string for timestamps.

    Returns:
        The ``resume_tailor`` logger.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logger.setLevel(log_level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(log_level)
    else:
        logger.handlers.clear()

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
        logger.addHandler(handler)

        # Output goes to stderr only; stdout carries command results.
        logger.propagate = False
        _configured = True

    third_party_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    return logger


def reset_logging() -> None:
    """Drop handlers and level so the next configure starts fresh (tests)."""
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    _configured = False
