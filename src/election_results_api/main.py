"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from election_results_api.core.config import Settings, get_settings
from election_results_api.core.logging import setup_logging
from election_results_api.lib.result_store import ResultStore


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: configure logging and report the data directory."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, log_dir=settings.log_dir)

    store: ResultStore = app.state.result_store
    if not store.base_dir.is_dir():
        logger.warning(f"Data directory {store.base_dir} does not exist; every lookup will miss")
    logger.info(f"Serving election results from {store.base_dir} on port {settings.port}")

    yield

    logger.info("Election results API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use; loaded from the environment when omitted.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Election Results API",
        description="Serves national and county election results from static JSON files",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.result_store = ResultStore(settings.data_dir)

    # Register exception handlers
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc)},
        )

    # Register middleware and routers
    from election_results_api.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router())

    return app
