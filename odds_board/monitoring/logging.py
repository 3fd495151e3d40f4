"""structlog setup shared by the CLI, the web app and the tests.

Events are rendered as JSON lines when ENVIRONMENT (or LOG_MODE for the CLI)
is "production" and as colored key=value lines otherwise. Everything is
written to stderr so that `odds-board show` keeps stdout for the tables.

    configure_logging("production")
    log = get_logger(__name__)
    log.info("dataset_loaded", path="data.json", match_count=3)
"""

import logging
import sys

import structlog


def configure_logging(mode: str = "development", level: int = logging.INFO) -> None:
    """Install the processor chain and route stdlib logging to stderr.

    Safe to call more than once; the app lifespan, the CLI entry point and
    the test suite each call it.

    Args:
        mode: "production" for JSON lines, anything else for console output
        level: Threshold applied to the stdlib root logger
    """
    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if mode == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for a module of the odds board; pass `__name__`."""
    return structlog.get_logger(name)


def bind_correlation_id(correlation_id: str) -> None:
    """Tag every event logged while serving one request with its request id.

    The request logging middleware binds the id it also returns in the
    X-Request-ID header.
    """
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def unbind_correlation_id() -> None:
    """Drop the request id from the logging context."""
    structlog.contextvars.unbind_contextvars("correlation_id")
