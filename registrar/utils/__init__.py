"""
Cross-cutting helpers.

- logging: Structured logging with structlog
"""

from .logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
