"""CORS middleware for routes called directly from the browser."""

from collections.abc import Callable, Iterable

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Stamp permissive CORS headers on every response for browser-facing paths.

    Any OPTIONS request to one of those paths is answered with an empty
    200, whether or not it carries the preflight request headers. Other
    paths (the scheduling webhook) pass through untouched.
    """

    def __init__(self, app: ASGIApp, paths: Iterable[str]) -> None:
        """
        Initialize middleware.

        Args:
            app: The wrapped ASGI application
            paths: Request paths that should receive CORS headers
        """
        super().__init__(app)
        self.paths = frozenset(paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path not in self.paths:
            return await call_next(request)

        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response
