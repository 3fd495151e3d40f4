"""Middleware package for security and logging."""

from .logging import RequestLoggingMiddleware
from .security import SecurityHeadersMiddleware

__all__ = ["SecurityHeadersMiddleware", "RequestLoggingMiddleware"]
