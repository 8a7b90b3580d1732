"""Logging module with structured logging and request tracking."""

from chronos.core.logging.middleware import RequestIdMiddleware, RequestLoggingMiddleware
from chronos.core.logging.setup import configure_logging


__all__ = [
    "RequestIdMiddleware",
    "RequestLoggingMiddleware",
    "configure_logging",
]
