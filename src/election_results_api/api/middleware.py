"""Cross-origin header middleware."""

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from election_results_api.core.config import Settings


class AllowOriginMiddleware(BaseHTTPMiddleware):
    """Set ``Access-Control-Allow-Origin`` on every response.

    Unlike Starlette's ``CORSMiddleware`` the header is added whether or not
    the request carries an ``Origin`` header, and on error responses too.
    """

    def __init__(self, app: ASGIApp, allow_origin: str = "*") -> None:
        super().__init__(app)
        self.allow_origin = allow_origin

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Add the allow-origin header to the response.

        Args:
            request: The incoming request.
            call_next: The next middleware/handler.

        Returns:
            Response with the allow-origin header.
        """
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = self.allow_origin
        return response


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Register the allow-origin middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    app.add_middleware(AllowOriginMiddleware, allow_origin=settings.cors_allow_origin)
