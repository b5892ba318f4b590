"""Request logging middleware."""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status and duration.

    Server errors are logged at ERROR, client errors at WARNING and
    everything else at INFO.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()
        logger.debug(f"Started {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"{request.method} {request.url.path} failed - {duration_ms:.0f}ms")
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        message = f"{request.method} {request.url.path} {response.status_code} - {duration_ms:.0f}ms"

        if response.status_code >= 500:
            logger.error(message)
        elif response.status_code >= 400:
            logger.warning(message)
        else:
            logger.info(message)

        return response
