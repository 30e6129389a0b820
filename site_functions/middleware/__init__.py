"""Middleware components for request processing."""

from site_functions.middleware.cors import CORS_HEADERS, CORSHeadersMiddleware
from site_functions.middleware.logging import LoggingMiddleware

__all__ = [
    "CORS_HEADERS",
    "CORSHeadersMiddleware",
    "LoggingMiddleware",
]
