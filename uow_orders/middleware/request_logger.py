# ==============================================================================
# REQUEST LOGGER MIDDLEWARE
# ==============================================================================
# Structured request/response logging with request correlation
# ==============================================================================

from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from uow_orders.core.logging import reset_request_id, set_request_id

logger = logging.getLogger(__name__)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Middleware for structured request/response logging.

    Logs request details, response status, and timing information.
    The request ID is stored in the logging context for the duration of
    the request and returned in the X-Request-ID header.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request with logging."""
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        token = set_request_id(request_id)

        start_time = time.perf_counter()
        logger.info(f"{request.method} {request.url.path} - Started")

        try:
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            log_level = logging.INFO if response.status_code < 400 else logging.WARNING
            logger.log(
                log_level,
                f"{request.method} {request.url.path} "
                f"- {response.status_code} ({duration_ms:.2f}ms)"
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

            return response

        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{request.method} {request.url.path} "
                f"- Error ({duration_ms:.2f}ms): {e}"
            )
            raise
        finally:
            reset_request_id(token)
