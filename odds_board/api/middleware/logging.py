"""Request logging middleware."""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from structlog.contextvars import bind_contextvars, clear_contextvars

from odds_board.monitoring import bind_correlation_id

log = structlog.get_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with structured metadata.

    Binds the request id (as correlation_id), method, path and client_ip to
    contextvars so any log event emitted while handling the request carries
    them. Health checks are not logged.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        clear_contextvars()

        request_id = str(uuid.uuid4())
        client_ip = request.client.host if request.client else None

        bind_correlation_id(request_id)
        bind_contextvars(
            method=request.method,
            path=request.url.path,
            client_ip=client_ip,
        )

        if request.url.path == "/api/health":
            return await call_next(request)

        start_time = time.time()
        response = await call_next(request)
        duration_ms = int((time.time() - start_time) * 1000)

        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        response.headers["X-Request-ID"] = request_id
        return response
