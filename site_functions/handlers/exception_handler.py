"""Global exception handlers for consistent error responses."""

from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from site_functions.exceptions import ConfigurationError, SiteFunctionError
from site_functions.logging.config import get_logger

logger = get_logger(__name__)

# pydantic error types that mean "the caller left this out"
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def create_error_response(
    error_code: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
    correlation_id: str | None = None,
) -> JSONResponse:
    """
    Create standardized error response.

    The body always carries ``status: false`` and a human-readable
    ``error`` so the site's front end can branch on a single shape.

    Args:
        error_code: Machine-readable error code
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        correlation_id: Request correlation ID for tracing

    Returns:
        JSONResponse with error information
    """
    content: dict[str, Any] = {
        "status": False,
        "error": message,
        "error_code": error_code,
    }

    if details:
        content["details"] = details

    if correlation_id:
        content["correlation_id"] = correlation_id

    return JSONResponse(status_code=status_code, content=content)


async def site_function_exception_handler(
    request: Request, exc: SiteFunctionError
) -> JSONResponse:
    """
    Handle SiteFunctionError and its subclasses.

    Args:
        request: FastAPI request
        exc: SiteFunctionError instance

    Returns:
        JSONResponse with error details
    """
    correlation_id = getattr(request.state, "correlation_id", None)

    if isinstance(exc, ConfigurationError):
        logger.error(
            f"Missing configuration: {exc.setting}",
            extra={
                "correlation_id": correlation_id,
                "context": {"path": request.url.path, "setting": exc.setting},
            },
        )

    return create_error_response(
        error_code=exc.error_code,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        correlation_id=correlation_id,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors from FastAPI.

    Missing or empty fields are reported as "Field is required"; custom
    validator failures keep their own message (e.g. "Invalid email").

    Args:
        request: FastAPI request
        exc: RequestValidationError from Pydantic

    Returns:
        400 JSONResponse with validation error details
    """
    correlation_id = getattr(request.state, "correlation_id", None)

    validation_errors = []
    error_messages = []

    for error in exc.errors():
        field_parts = [str(loc) for loc in error["loc"] if loc != "body"]
        field = ".".join(field_parts) if field_parts else "request"

        msg = error["msg"]
        error_type = error["type"]

        if error_type in _MISSING_ERROR_TYPES:
            msg = "Field is required"
        elif error_type == "value_error" and "error" in error.get("ctx", {}):
            msg = str(error["ctx"]["error"])
        elif error_type == "json_invalid":
            msg = "Request body is not valid JSON"

        validation_errors.append({"field": field, "message": msg, "type": error_type})
        error_messages.append(f"{field}: {msg}")

    summary = error_messages[0] if error_messages else "Invalid request data"
    if len(error_messages) > 1:
        summary += f" (and {len(error_messages) - 1} more errors)"

    return create_error_response(
        error_code="VALIDATION_ERROR",
        message=summary,
        status_code=status.HTTP_400_BAD_REQUEST,
        details={"validation_errors": validation_errors},
        correlation_id=correlation_id,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing errors raised by Starlette (404, 405).

    Args:
        request: FastAPI request
        exc: HTTPException raised by the router

    Returns:
        JSONResponse in the standard error shape
    """
    correlation_id = getattr(request.state, "correlation_id", None)

    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        response = create_error_response(
            error_code="METHOD_NOT_ALLOWED",
            message="Use POST",
            status_code=exc.status_code,
            correlation_id=correlation_id,
        )
    else:
        response = create_error_response(
            error_code="NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR",
            message=str(exc.detail),
            status_code=exc.status_code,
            correlation_id=correlation_id,
        )

    if exc.headers:
        response.headers.update(exc.headers)

    return response


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs the full traceback and returns a generic 500 to the client.

    Args:
        request: FastAPI request
        exc: Any unhandled exception

    Returns:
        JSONResponse with generic error message
    """
    correlation_id = getattr(request.state, "correlation_id", None)

    logger.error(
        f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
        exc_info=exc,
        extra={
            "correlation_id": correlation_id,
            "context": {
                "exception_type": type(exc).__name__,
                "method": request.method,
                "path": request.url.path,
            },
        },
    )

    return create_error_response(
        error_code="INTERNAL_ERROR",
        message="Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        correlation_id=correlation_id,
    )
