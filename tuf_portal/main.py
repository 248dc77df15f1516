from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette.exceptions import HTTPException as StarletteHTTPException

from tuf_portal import __version__
from tuf_portal.core.logging_config import setup_logging
from tuf_portal.core.settings import settings
from tuf_portal.middleware.logging import LoggingMiddleware
from tuf_portal.middleware.rate_limit import RateLimitMiddleware
from tuf_portal.config import init_firebase
from tuf_portal.exceptions import PortalException, UnauthorizedException
from tuf_portal.routes import (
    auth, profile, mentors, notes, events, clubs,
    opportunities, projects_ifp, links, discussions, health,
)

# Set up logging first
logger = setup_logging()

_docs_enabled = not settings.is_production


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 50)
    logger.info("Take U Forward portal API starting up")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"CORS origins: {settings.cors_origins}")
    logger.info(f"Rate limiting: {'enabled' if settings.rate_limit_enabled else 'disabled'}")
    logger.info(f"SQL Debug: {'enabled' if settings.sql_debug else 'disabled'}")
    logger.info("=" * 50)
    yield
    logger.info("Take U Forward portal API shutting down")


app = FastAPI(
    title="Take U Forward Portal API",
    description="Notes, events, clubs, mentors and opportunities for students",
    version=__version__,
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
    lifespan=lifespan,
)

# Add middleware in correct order (last added = first executed)
if settings.rate_limit_enabled:
    app.add_middleware(RateLimitMiddleware, calls_per_minute=settings.rate_limit_per_minute)

app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_origins != ["*"],
    allow_methods=["GET", "POST", "PUT", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)

# Initialize the identity provider SDK (skip in test environment)
if not settings.is_test:
    init_firebase()

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(mentors.router)
app.include_router(notes.router)
app.include_router(events.router)
app.include_router(clubs.router)
app.include_router(opportunities.router)
app.include_router(projects_ifp.router)
app.include_router(links.router)
app.include_router(discussions.router)


def _correlation_id(request: Request) -> str:
    return getattr(request.state, 'correlation_id', 'unknown')


# Exception handlers
@app.exception_handler(PortalException)
async def portal_exception_handler(request: Request, exc: PortalException):
    correlation_id = _correlation_id(request)
    logger.warning(f"[{correlation_id}] {type(exc).__name__} on {request.url.path}: {exc.detail}")
    content = {"message": exc.detail, "correlation_id": correlation_id}
    if exc.errors:
        content["errors"] = exc.errors
    if isinstance(exc, UnauthorizedException):
        content["login_url"] = settings.login_url
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    correlation_id = _correlation_id(request)
    errors = [
        {"field": ".".join(str(p) for p in err["loc"] if p != "body"), "message": err["msg"]}
        for err in exc.errors()
    ]
    logger.warning(f"[{correlation_id}] Validation error on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request payload", "errors": errors, "correlation_id": correlation_id},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail), "correlation_id": _correlation_id(request)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    correlation_id = _correlation_id(request)
    logger.error(f"[{correlation_id}] Unhandled exception on {request.url.path}: {str(exc)}", exc_info=True)

    content = {"message": "Internal server error", "correlation_id": correlation_id}
    if settings.is_development:
        content["error"] = str(exc)
        content["type"] = type(exc).__name__
    return JSONResponse(status_code=500, content=content)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Take U Forward Portal API",
        "version": __version__,
        "environment": settings.environment,
        "docs_url": "/docs" if _docs_enabled else None,
        "health_check": "/health",
        "status": "running",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info" if settings.is_development else "warning",
    )
