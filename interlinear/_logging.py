"""
Structured logging utilities for the interlinear library.

Provides a configured logger and helper functions for consistent logging.
"""

import logging
import sys
from typing import Optional


# Default format for interlinear logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "interlinear"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "interlinear")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the interlinear library.

    Args:
        level: Logging level (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for interlinear
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            format_string or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )

    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the interlinear library."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all interlinear logging."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


_logger = get_logger()


def log_fetch_start(url: str) -> None:
    """Log the start of an annotation fetch."""
    _logger.debug(f"Fetching annotation resource: {url}")


def log_cache_hit(url: str) -> None:
    """Log a request served by an existing cache entry."""
    _logger.debug(f"Annotation cache hit: {url}")


def log_ignored_options(url: str, keys: list[str]) -> None:
    """Log fetch options a fetcher does not understand."""
    _logger.debug(f"Ignoring unsupported fetch options for {url}: {', '.join(keys)}")


def log_merge_complete(wrapped: int, eligible: int, annotations: int) -> None:
    """Log the outcome of a merge."""
    _logger.debug(
        f"Merge complete: wrapped {wrapped}/{eligible} eligible blocks "
        f"with {annotations} annotations"
    )


def log_warning(message: str, **context) -> None:
    """Log a warning with optional context."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.warning(f"{message} ({ctx_str})")
    else:
        _logger.warning(message)


def log_error(message: str, exc_info: bool = False, **context) -> None:
    """Log an error with optional context and exception info."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.error(f"{message} ({ctx_str})", exc_info=exc_info)
    else:
        _logger.error(message, exc_info=exc_info)
