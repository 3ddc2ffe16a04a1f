"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from user_directory import __version__
from user_directory.api.exception_handlers import setup_exception_handlers
from user_directory.api.middleware.logging import RequestLoggingMiddleware
from user_directory.api.middleware.request_id import RequestIDMiddleware
from user_directory.api.middleware.security import SecurityHeadersMiddleware
from user_directory.api.routes.health import router as health_router
from user_directory.api.routes.users import router as users_router
from user_directory.core.config import settings
from user_directory.core.logging import setup_logging
from user_directory.core.rate_limit import limiter, rate_limit_exceeded_handler
from user_directory.infrastructure.memory.user_store import InMemoryUserStore

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown tasks."""
    logger.info("server_started", app_name=settings.app_name, port=settings.port)
    yield
    logger.info("server_stopped", users=app.state.user_store.count())


def create_app(user_store: InMemoryUserStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns exactly one store; pass one in to share or
    pre-populate it.
    """
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## User Directory\n\n"
            "An in-memory REST directory of users with paginated, "
            "country-filtered listing.\n\n"
            "### Notes\n"
            "- Data lives only as long as the process\n"
            "- `PUT` replaces a user wholesale; omitted fields are cleared\n"
            "- Errors are returned as plain text"
        ),
        version=__version__,
        debug=settings.debug,
        # "/users/" is an item lookup with an empty ID, not the collection.
        redirect_slashes=False,
        license_info={
            "name": "MIT",
        },
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "users",
                "description": "User management operations",
            },
        ],
    )

    app.state.user_store = user_store if user_store is not None else InMemoryUserStore()

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(users_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "user_directory.main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
        access_log=False,
    )


if __name__ == "__main__":
    run()
