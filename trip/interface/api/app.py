"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from trip.config import Settings
from trip.interface.api.routes import (
    auth,
    comments,
    health,
    items,
    presence,
    version,
    votes,
)
from trip.util.di.container import create_container, setup_di
from trip.util.observability import instrument_fastapi

API_PREFIX = "/api"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed or incomplete requests as 400 with a readable detail."""
    missing = [
        str(err["loc"][-1]) for err in exc.errors() if err.get("type") == "missing"
    ]
    if missing:
        detail = f"Missing required fields: {', '.join(missing)}"
    else:
        detail = "; ".join(
            f"{err['loc'][-1]}: {err['msg']}" for err in exc.errors()
        ) or "Invalid request"
    logfire.warn("Request rejected", path=request.url.path, detail=detail)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail}
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Hide unexpected failures behind a generic 500."""
    logfire.error(
        "Unhandled error", path=request.url.path, error=str(exc), _exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; a production container is built
            when omitted (tests pass one with in-memory persistence)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Trip Planner API",
        description="Shared flight, hotel, activity and restaurant options with votes and comments",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "Cache-Control"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(
        RequestValidationError,
        request_validation_handler,  # type: ignore[arg-type]
    )
    app_instance.add_exception_handler(Exception, unhandled_error_handler)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    for router in items.routers:
        app_instance.include_router(router, prefix=API_PREFIX)
    app_instance.include_router(votes.router, prefix=API_PREFIX)
    app_instance.include_router(comments.router, prefix=API_PREFIX)
    app_instance.include_router(auth.router, prefix=API_PREFIX)
    app_instance.include_router(presence.router, prefix=API_PREFIX)
    app_instance.include_router(version.router, prefix=API_PREFIX)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
