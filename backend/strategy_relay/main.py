"""
PURPOSE: Main FastAPI application factory and lifecycle management for the Strategic Update Relay.

Initializes the FastAPI application with:
- The API router (strategic update webhook under /api)
- Exception handlers mapping relay errors to JSON error bodies
- Startup logging and tracker configuration warnings
- Metadata from version.json
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from strategy_relay.api import api_router
from strategy_relay.config.settings import settings
from strategy_relay.core.errors import MethodNotAllowed, StrategyRelayError
from strategy_relay.utils.logger import get_logger, setup_logging
from strategy_relay.version import get_version


logger = get_logger(__name__)


# ════════════════════════════════════════════════════════════════
# Lifecycle Events
# ════════════════════════════════════════════════════════════════


async def on_startup() -> None:
    """
    PURPOSE: Execute startup tasks.

    CALLED BY: FastAPI lifespan startup

    Tasks:
        1. Setup logging with configured level
        2. Warn when tracker settings are missing (calls will fail until set)
    """
    setup_logging(settings.LOG_LEVEL)
    logger.info(
        "application_startup_starting",
        log_level=settings.LOG_LEVEL,
        app_env=settings.APP_ENV,
        repository=f"{settings.GITHUB_REPO_OWNER}/{settings.GITHUB_REPO_NAME}",
    )

    missing = settings.get_missing_tracker_settings()
    if missing:
        logger.warning(
            "tracker_settings_missing",
            message="Issue creation will fail until these are set.",
            settings=missing,
        )

    logger.info("application_startup_complete")


async def on_shutdown() -> None:
    """
    PURPOSE: Execute shutdown tasks.

    CALLED BY: FastAPI lifespan shutdown
    """
    logger.info("application_shutdown_complete")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    PURPOSE: Manage application lifespan with startup and shutdown events.

    CALLED BY: FastAPI during application startup and shutdown

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    # Startup
    await on_startup()

    yield

    # Shutdown
    await on_shutdown()


# ════════════════════════════════════════════════════════════════
# Exception Handlers
# ════════════════════════════════════════════════════════════════


async def relay_exception_handler(
    request: Request,
    exc: StrategyRelayError
) -> JSONResponse:
    """
    PURPOSE: Convert relay errors to their JSON error bodies.

    CALLED BY: FastAPI when a route raises StrategyRelayError

    Args:
        request: HTTP request that raised the error
        exc: Relay error carrying http_status and response body

    Returns:
        JSONResponse: {"error": ...} body with the error's HTTP status
    """
    # Server-side failures are already logged at error level where they are wrapped
    log = logger.debug if exc.http_status >= 500 else logger.warning
    log(
        "strategic_update_rejected",
        path=request.url.path,
        method=request.method,
        status_code=exc.http_status,
        error=str(exc),
        exception_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_response_body(),
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    PURPOSE: Keep routing errors in the relay's {"error": ...} shape.

    Starlette raises 405 when the path exists but the method is not POST;
    that case gets the relay's MethodNotAllowed body and keeps Starlette's
    Allow header.

    Args:
        request: HTTP request that failed routing
        exc: Starlette HTTPException

    Returns:
        JSONResponse: {"error": ...} body with the original status
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        response = await relay_exception_handler(request, MethodNotAllowed(request.method))
        response.headers.update(getattr(exc, "headers", None) or {})
        return response

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    PURPOSE: Handle unexpected exceptions with logging and a JSON error response.

    CALLED BY: FastAPI exception handler middleware

    Args:
        request: HTTP request that raised exception
        exc: Exception that was raised

    Returns:
        JSONResponse: Processing failed body with the error message as details
    """
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exception_type=type(exc).__name__
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Processing failed",
            "details": str(exc),
        },
    )


# ════════════════════════════════════════════════════════════════
# FastAPI Application Factory
# ════════════════════════════════════════════════════════════════


def create_app() -> FastAPI:
    """
    PURPOSE: Create and configure FastAPI application with routers and handlers.

    CALLED BY: Application entrypoint (uvicorn, docker, etc)

    Returns:
        FastAPI: Configured FastAPI application ready to run
    """
    # Get version info
    try:
        version_data = get_version()
        version = version_data.get("version", "unknown")
        description = f"Strategic Update Relay - {version_data.get('codename', 'Watson Bridge')}"
    except Exception as e:
        logger.warning("version_data_unavailable", error=str(e))
        version = "unknown"
        description = "Strategic Update Relay"

    title = "Strategic Update Relay"

    # Create FastAPI instance
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url=None,
        openapi_url="/openapi.json" if not settings.is_production() else None,
    )

    # ────────────────────────────────────────────────────────────
    # Routes
    # ────────────────────────────────────────────────────────────

    app.include_router(api_router)

    # Root endpoint
    @app.get("/", tags=["root"])
    async def root():
        """
        PURPOSE: Root endpoint for API availability check.

        CALLED BY: Load balancers, basic connectivity tests

        Returns:
            dict: Service information and version
        """
        return {
            "status": "ok",
            "service": title,
            "version": version,
        }

    # ────────────────────────────────────────────────────────────
    # Exception Handlers
    # ────────────────────────────────────────────────────────────

    app.add_exception_handler(StrategyRelayError, relay_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info(
        "fastapi_application_created",
        title=title,
        version=version,
        api_prefix="/api"
    )

    return app


# Create the application
app = create_app()


if __name__ == "__main__":
    """
    PURPOSE: Run FastAPI application with Uvicorn server.

    Usage:
        python -m strategy_relay.main
        OR
        uvicorn strategy_relay.main:app --host 0.0.0.0 --port 8000
    """
    import uvicorn

    uvicorn.run(
        "strategy_relay.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower(),
    )
