"""Monitoring module for structured logging.

Provides structlog configuration shared by the CLI and the web app:
- Structured JSON logging for production
- Human-readable console output for development
- Correlation IDs for request tracing
"""

from odds_board.monitoring.logging import (
    configure_logging,
    get_logger,
    bind_correlation_id,
    unbind_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_correlation_id",
    "unbind_correlation_id",
]
