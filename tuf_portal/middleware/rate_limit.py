"""In-memory per-client rate limiting (sliding one-minute window).

Resets on process restart; a shared store is needed once the API runs on
more than one instance.
"""

from datetime import datetime, timedelta, timezone

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

WINDOW = timedelta(minutes=1)
EXEMPT_PATHS = {"/health", "/health/detailed", "/live", "/ready"}


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, calls_per_minute: int = 60):
        super().__init__(app)
        self.calls_per_minute = calls_per_minute
        self._hits: dict[str, list[datetime]] = {}
        self._last_sweep = datetime.now(timezone.utc)

    def _sweep(self, now: datetime) -> None:
        """Forget clients with no hits inside the window."""
        stale = [key for key, hits in self._hits.items() if not hits or now - hits[-1] >= WINDOW]
        for key in stale:
            del self._hits[key]
        self._last_sweep = now

    def _allow(self, identifier: str) -> bool:
        now = datetime.now(timezone.utc)
        if now - self._last_sweep >= WINDOW:
            self._sweep(now)
        recent = [ts for ts in self._hits.get(identifier, []) if now - ts < WINDOW]
        if len(recent) >= self.calls_per_minute:
            self._hits[identifier] = recent
            return False
        recent.append(now)
        self._hits[identifier] = recent
        return True

    async def dispatch(self, request: Request, call_next):
        if request.url.path in EXEMPT_PATHS:
            return await call_next(request)
        client_ip = request.client.host if request.client else "unknown"
        if not self._allow(client_ip):
            return JSONResponse(
                status_code=429,
                content={"message": "Too many requests. Please try again later."},
            )
        return await call_next(request)
