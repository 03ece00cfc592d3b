"""
Centralized logging configuration for the divider designer.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import TYPE_CHECKING, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..models.results import CalculationResult


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


def get_solver_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the solver subsystem.

    The context is passed as initial values so the logger still picks up
    configure_logging() when created at import time.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for solve outcomes
    """
    return structlog.get_logger(name, subsystem="solver")


def log_solve_outcome(
    logger: FilteringBoundLogger,
    v_in: float,
    target_v_out: float,
    result: "CalculationResult"
) -> None:
    """
    Log one solve call with standardized fields.

    Accepted requests log at info with the chosen pair; rejected ones log at
    warning with the error kind.
    """
    bound_logger = logger.bind(v_in=v_in, target_v_out=target_v_out)

    pair = result.best_pair
    if pair is not None:
        bound_logger.info(
            "Divider solved",
            r1=pair.r1_formatted,
            r2=pair.r2_formatted,
            actual_v_out=pair.actual_v_out,
            deviation_percent=pair.deviation_percent,
            is_safe=pair.is_safe
        )
    else:
        bound_logger.warning(
            "Divider request rejected",
            error_kind=result.error_kind.value if result.error_kind else None,
            error=result.error
        )
