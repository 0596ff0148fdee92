"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and lifecycle handlers.
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from nova_users.core.config import get_settings
from nova_users.core.i18n import set_locale
from nova_users.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from nova_users.core.profiler import end_profile, start_profile
from nova_users.infrastructure.persistence.database import close_database, init_database
from nova_users.infrastructure.web.assets import ASSETS_PREFIX, create_assets_app
from nova_users.infrastructure.web.routes.language_router import LOCALE_SESSION_KEY
from nova_users.infrastructure.web.templating import get_view_renderer

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting Nova Users",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down Nova Users")
    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Roles administration for the Users module",
        docs_url=None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Returns 200 if the service is running."""
        return {
            "status": "healthy",
            "service": get_settings().app_name,
            "version": get_settings().app_version,
        }


def register_routes(app: FastAPI) -> None:
    """Register page routes and the assets mount.

    Args:
        app: FastAPI application instance.
    """
    from nova_users.infrastructure.web.routes import language_router, roles_router

    app.include_router(roles_router, prefix="/roles")
    app.include_router(language_router, prefix="/language")
    app.mount(ASSETS_PREFIX, create_assets_app(get_settings()), name="assets")

    @app.get("/", include_in_schema=False)
    async def home():
        return RedirectResponse("/roles", status_code=303)


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTP errors (404, 405, ...) as HTML pages."""
        return get_view_renderer().render_error(
            request,
            title=f"{exc.status_code}",
            message=str(exc.detail),
            status_code=exc.status_code,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        settings = get_settings()
        return get_view_renderer().render_error(
            request,
            title="Internal Server Error",
            message=str(exc) if settings.debug else "An unexpected error occurred",
            status_code=500,
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    The session middleware is added last so it wraps the request middleware
    and the session is available to it.

    Args:
        app: FastAPI application instance.
    """
    settings = get_settings()

    @app.middleware("http")
    async def request_middleware(request: Request, call_next):
        """Bind correlation ID, locale and profile for the request, then log it."""
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)
        set_locale(request.session.get(LOCALE_SESSION_KEY))
        profile = start_profile(count_queries=settings.profiler_with_database)

        logger.debug(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            if settings.profiler_use_forensics:
                logger.info(
                    "Request profile",
                    path=str(request.url.path),
                    **profile.as_dict(),
                )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            end_profile()
            set_locale(None)
            clear_context()

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie,
        same_site="lax",
        https_only=settings.is_production,
    )


app = create_app()
