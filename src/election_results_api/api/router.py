"""Root API router and middleware registration."""

from fastapi import APIRouter, FastAPI

from election_results_api.api.middleware import setup_cors
from election_results_api.core.config import Settings


def create_router() -> APIRouter:
    """Create the root API router with all sub-routers included.

    Returns:
        Configured API router.
    """
    from election_results_api.api.v1.health import health_router
    from election_results_api.api.v1.results import results_router

    root_router = APIRouter()
    root_router.include_router(health_router)
    root_router.include_router(results_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
