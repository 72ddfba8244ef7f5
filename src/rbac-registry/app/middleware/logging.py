"""Request logging middleware.

Every request gets a request ID, taken from the X-Request-ID header when the
caller sends one. The ID is bound to all log events emitted while the request
is handled and echoed back on the response.
"""

from __future__ import annotations

import time
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from shared.observability import get_logger, log_request_end, log_request_start, request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs the start and end of each request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        token = request_id_var.set(request_id)
        request.state.request_id = request_id

        client_ip = request.client.host if request.client else None
        log_request_start(logger, request.method, request.url.path, client_ip)
        start = time.perf_counter()

        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            log_request_end(
                logger,
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - start) * 1000,
            )
            return response
        finally:
            request_id_var.reset(token)
