"""
Centralized logging configuration for the calculator core.

This module provides standardized logging configuration using structlog
for all components. Every state machine action, expression evaluation and
unit conversion logs through loggers obtained here so output stays
consistently structured.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for calculator state transitions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger bound to the state machine subsystem
    """
    return get_logger(name).bind(subsystem="state_machine")


def get_evaluator_logger(name: str) -> FilteringBoundLogger:
    """Get a logger for expression evaluation and unit conversion."""
    return get_logger(name).bind(subsystem="evaluator")


def log_state_transition(
    logger: FilteringBoundLogger,
    action: str,
    from_display: str,
    to_display: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a calculator state transition with standardized format.

    Args:
        logger: Structlog logger instance
        action: State machine action that ran (e.g. "append_digit")
        from_display: Display string before the action
        to_display: Display string after the action
        context: Additional context data
    """
    bound_logger = logger.bind(
        action=action,
        from_display=from_display,
        to_display=to_display,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("state_transition")


def log_error_result(
    logger: FilteringBoundLogger,
    operation: str,
    error: Exception,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log an error that is being returned to the caller as a typed result.

    Args:
        logger: Structlog logger instance
        operation: Operation that failed
        error: The classified error
        context: Additional context data
    """
    kind = getattr(error, "kind", None)
    bound_logger = logger.bind(
        operation=operation,
        error_kind=kind.value if kind is not None else type(error).__name__,
        error_message=str(error),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("operation_failed")
