"""structlog configuration for the critic CLI.

Library modules only call ``structlog.get_logger(__name__)``; the CLI calls
configure_logging() once per invocation to choose level and format.
Log output goes to stderr so reports on stdout stay machine-readable.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = True,
) -> None:
    """Configure structlog level filtering and rendering.

    Args:
        log_level: Minimum level to emit (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, render JSON lines. If False, use console format.

    Raises:
        ValueError: If ``log_level`` is not a known level name.

    Examples:
        >>> configure_logging(log_level="DEBUG", json_output=False)
        >>> structlog.get_logger().info("configured")
    """
    level_name = log_level.upper()
    if level_name not in LOG_LEVELS:
        msg = f"Invalid log level '{log_level}', expected one of {', '.join(LOG_LEVELS)}"
        raise ValueError(msg)

    renderer: structlog.typing.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


__all__ = [
    "LOG_LEVELS",
    "configure_logging",
]
