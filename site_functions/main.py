"""FastAPI application factory and the combined local development app."""

from collections.abc import Iterable

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from site_functions.config import settings
from site_functions.exceptions import SiteFunctionError
from site_functions.handlers.exception_handler import (
    generic_exception_handler,
    http_exception_handler,
    site_function_exception_handler,
    validation_exception_handler,
)
from site_functions.logging.config import configure_logging
from site_functions.middleware.cors import CORSHeadersMiddleware
from site_functions.middleware.logging import LoggingMiddleware
from site_functions.routes import analytics, calcom, contact, hubspot, status

# Configure logging once per cold start, before any app is created
configure_logging()

# Routes called directly from the website's browser code
BROWSER_PATHS = (contact.PATH, hubspot.PATH, analytics.PATH)


def create_app(
    routers: Iterable[APIRouter],
    cors_paths: Iterable[str] = (),
    title: str | None = None,
) -> FastAPI:
    """
    Build an ASGI app serving the given function routers.

    Each deployed function gets its own app so it can be shipped as an
    independent Lambda; the combined ``app`` below mounts all of them.

    Args:
        routers: Routers to include
        cors_paths: Paths that receive CORS headers and OPTIONS handling
        title: OpenAPI title (defaults to the API_TITLE setting)

    Returns:
        Configured FastAPI application
    """
    application = FastAPI(
        title=title or settings.api_title,
        version=settings.api_version,
        description=(
            "Serverless functions connecting the marketing website to "
            "Supabase, HubSpot, Cal.com and Resend."
        ),
        docs_url="/docs",
        redoc_url=None,
    )

    # Last added = outermost: logging wraps CORS so preflights are logged too
    cors_paths = tuple(cors_paths)
    if cors_paths:
        application.add_middleware(CORSHeadersMiddleware, paths=cors_paths)
    application.add_middleware(LoggingMiddleware)

    application.add_exception_handler(SiteFunctionError, site_function_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, generic_exception_handler)

    for router in routers:
        application.include_router(router)

    return application


app = create_app(
    [contact.router, hubspot.router, calcom.router, analytics.router, status.router],
    cors_paths=BROWSER_PATHS,
)
