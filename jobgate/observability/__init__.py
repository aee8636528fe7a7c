"""Observability helpers: structlog setup and component loggers."""

from jobgate.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
