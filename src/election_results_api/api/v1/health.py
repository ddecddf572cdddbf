"""Service banner and health check endpoints.

GET / — plaintext banner
GET /health — plaintext liveness check

Both also answer HEAD for load balancer probes.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

health_router = APIRouter(tags=["health"])


@health_router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse, status_code=200)
async def root() -> str:
    """Return the service banner."""
    return "Go go server"


@health_router.api_route("/health", methods=["GET", "HEAD"], response_class=PlainTextResponse, status_code=200)
async def health_check() -> str:
    """Health check endpoint."""
    return "Ok"
