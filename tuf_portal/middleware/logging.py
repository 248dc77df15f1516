"""Request logging middleware with correlation ids."""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("tuf_portal.requests")

SKIP_LOGGING_PATHS = {"/health", "/live", "/ready", "/favicon.ico", "/docs", "/openapi.json"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """Attach ``request.state.correlation_id`` and log every request with its duration."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        request.state.correlation_id = correlation_id
        path = request.url.path

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        response.headers["X-Request-ID"] = correlation_id
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

        if path not in SKIP_LOGGING_PATHS:
            status_code = response.status_code
            if status_code >= 500:
                level = logging.ERROR
            elif status_code >= 400:
                level = logging.WARNING
            else:
                level = logging.INFO
            logger.log(
                level,
                f"[{correlation_id}] {request.method} {path} -> {status_code} ({duration_ms:.1f}ms)",
            )
        return response
