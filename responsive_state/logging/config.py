"""
Centralized logging configuration for the responsive state package.

This module provides standardized logging configuration using structlog.
Library code only obtains loggers; applications decide whether and how to
render them by calling `configure_logging`.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None,
    colors: bool = False
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Output stream for rendered entries (defaults to stdout)
        colors: Colorize console output (ignored for JSON)
    """
    # Map level name to the stdlib constant (raises AttributeError if unknown)
    log_level = getattr(logging, level.upper())

    # Route structlog through stdlib logging; structlog renders the message
    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    # Level filtering and context enrichment run before rendering
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # ISO 8601 timestamps
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Caller filename and line number
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    # Caller-supplied processors run just before the renderer
    if extra_processors:
        processors.extend(extra_processors)

    # Renderer must be last in the chain
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))

    # Bound loggers are cached after first use; reconfigure before logging
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger instance
    """
    return structlog.get_logger(name)


def get_reducer_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with reducer context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the responsive state subsystem
    """
    return get_logger(name).bind(subsystem="responsive_state")


def log_recalculation(
    logger: FilteringBoundLogger,
    media_type: str,
    orientation: Optional[str],
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a responsive state recalculation with standardized format.

    Args:
        logger: Structlog logger instance
        media_type: Resolved media type
        orientation: Resolved orientation, if any
        trigger: What caused the recalculation (action type or "init")
        context: Additional context data
    """
    bound_logger = logger.bind(
        media_type=media_type,
        orientation=orientation,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Responsive state recalculated")
