"""Request logging middleware with correlation ID support."""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from site_functions.logging.config import get_logger

logger = get_logger(__name__)


def _get_or_generate_correlation_id(request: Request) -> str:
    """
    Pick the correlation ID for a request.

    Order: the caller's X-Request-ID header, the Lambda request ID that
    Mangum exposes in the ASGI scope, then a fresh UUID.

    Args:
        request: The incoming request

    Returns:
        The correlation ID
    """
    header_value = request.headers.get("X-Request-ID")
    if header_value:
        return header_value

    aws_context = request.scope.get("aws.context")
    aws_request_id = getattr(aws_context, "aws_request_id", None)
    if aws_request_id:
        return aws_request_id

    return str(uuid.uuid4())


def _log_request_start(request: Request, correlation_id: str) -> None:
    logger.info(
        "Request started",
        extra={
            "correlation_id": correlation_id,
            "context": {
                "method": request.method,
                "path": request.url.path,
                "user_agent": request.headers.get("user-agent"),
            },
        },
    )


def _log_request_error(
    request: Request, correlation_id: str, exc: Exception, elapsed_ms: float
) -> None:
    logger.error(
        "Request failed with exception",
        exc_info=exc,
        extra={
            "correlation_id": correlation_id,
            "context": {
                "method": request.method,
                "path": request.url.path,
                "response_time_ms": round(elapsed_ms, 2),
            },
        },
    )


def _log_request_complete(
    request: Request, response: Response, correlation_id: str, elapsed_ms: float
) -> None:
    logger.info(
        "Request completed",
        extra={
            "correlation_id": correlation_id,
            "context": {
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "response_time_ms": round(elapsed_ms, 2),
            },
        },
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all HTTP requests and responses.

    Stores the correlation ID on ``request.state`` so services and
    exception handlers can attach it to their own log lines, and echoes
    it back in the X-Request-ID response header. Request bodies and
    headers other than the user agent are never logged.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = _get_or_generate_correlation_id(request)
        request.state.correlation_id = correlation_id

        start_time = time.perf_counter()
        _log_request_start(request, correlation_id)

        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            _log_request_error(request, correlation_id, exc, elapsed_ms)
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        _log_request_complete(request, response, correlation_id, elapsed_ms)

        response.headers["X-Request-ID"] = correlation_id

        return response
