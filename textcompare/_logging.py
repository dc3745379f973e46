"""
Structured logging utilities for the textcompare library.

Provides a configured logger and helper functions for consistent logging.
"""

import logging
import sys
from typing import Optional


# Default format for textcompare logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "textcompare"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "textcompare")

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int | str | None = None,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the textcompare library.

    Args:
        level: Logging level (default: ``log_level`` from settings)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for textcompare
    """
    if level is None:
        from textcompare.config import get_settings

        level = get_settings().log_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the textcompare library."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all textcompare logging."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


_logger = get_logger()


def log_alignment_complete(len1: int, len2: int, path_length: int) -> None:
    """Log a recovered alignment path."""
    _logger.debug(f"Alignment complete: {len1}x{len2} matrix, path of {path_length} cells")


def log_segmentation_complete(grapheme_count: int, token_count: int, fallback_count: int) -> None:
    """Log a finished max-match segmentation."""
    _logger.debug(
        f"Segmentation complete: {grapheme_count} graphemes -> {token_count} tokens "
        f"({fallback_count} single-grapheme fallbacks)"
    )


def log_warning(message: str, **context) -> None:
    """Log a warning with optional context."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.warning(f"{message} ({ctx_str})")
    else:
        _logger.warning(message)
