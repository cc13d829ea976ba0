"""
Structured logging configuration using structlog.

Once setup_logging has run, log lines go to stderr so they never interleave
with the terminal display, which owns stdout. RegistrarOffice runs it on
construction, so callers of the office never need to.

Example:
    >>> from registrar.utils.logging import setup_logging, get_logger
    >>> setup_logging(config)
    >>> logger = get_logger(__name__)
    >>> logger.info("student_enrolled", student_id="STU0001", course_code="CSE101")
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from ..config import RegistrarConfig


def setup_logging(config: "RegistrarConfig") -> None:
    """
    Configure structured logging for the registrar.

    Args:
        config: Registrar config carrying the log level name.
    """
    log_level = getattr(logging, config.log_level.upper(), logging.WARNING)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )
    logging.getLogger("registrar").setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given module name (usually __name__)."""
    return structlog.get_logger(name)
