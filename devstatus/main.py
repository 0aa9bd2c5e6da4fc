"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devstatus.api.status_router import router as status_router
from devstatus.core.config import Settings
from devstatus.core.exceptions import AppException, app_exception_handler
from devstatus.core.logging import configure_logging

logger = structlog.get_logger()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around a single Settings instance."""
    settings = settings or Settings()
    configure_logging(settings.app)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup and shutdown events."""
        logger.info(
            "Starting application",
            app_name=settings.app.name,
            environment=settings.mode.value,
            database_host=settings.database.host,
        )
        yield
        logger.info("Shutting down application")

    app = FastAPI(
        title=f"{settings.app.name} status",
        description="Developer environment status page",
        version=settings.app.version,
        lifespan=lifespan,
        debug=settings.app.error_reporting.debug,
    )
    app.state.settings = settings

    # Exception handlers
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(status_router)
    return app


app = create_app()
