"""
Structured logging configuration using structlog.

Console output is meant for development; JSON output is meant for services
that embed the solver and ship logs to a collector. The solver itself only
emits debug events (construction, non-convergence), so the default INFO
level keeps it quiet.
"""
import sys
import logging
import structlog
from pathlib import Path
from typing import Optional

from geodesic_solver.utils.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_level(log_level: str) -> int:
    name = log_level.upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level '{log_level}', expected one of {', '.join(LOG_LEVELS)}"
        )
    return getattr(logging, name)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    json_output: bool = False
):
    """
    Configure structured logging for the solver and its callers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path; file output is always plain messages
        json_output: If True, render events as JSON; else human-readable console

    Raises:
        ConfigurationError: If log_level is not a known level name

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> get_logger(__name__).debug("inverse_not_converged", iterations=50)
    """
    level = _resolve_level(log_level)

    # force=True so a second call replaces the handlers of the first
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    processors.append(
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter('%(message)s'))
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str):
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structured logger with bound context

    Events go through the standard library logger of the same name, so an
    application that never calls configure_logging sees nothing below
    WARNING from the solver.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
