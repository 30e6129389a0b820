"""Tests for logging middleware and JSON log formatting."""

import contextlib
import json
import logging
import uuid
from io import StringIO
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from site_functions.logging.config import JSONFormatter
from site_functions.middleware.logging import LoggingMiddleware


@pytest.fixture
def app_with_logging() -> FastAPI:
    """Create a test FastAPI app with logging middleware."""
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)

    @app.get("/test")
    async def test_endpoint(request: Request) -> dict[str, str]:
        return {"correlation_id": request.state.correlation_id}

    @app.get("/error")
    async def error_endpoint() -> None:
        raise ValueError("Test error")

    return app


async def get(app: FastAPI, path: str, **kwargs):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        return await client.get(path, **kwargs)


@pytest.mark.asyncio
async def test_generates_correlation_id(app_with_logging: FastAPI) -> None:
    response = await get(app_with_logging, "/test")

    assert response.status_code == 200
    correlation_id = response.json()["correlation_id"]
    uuid.UUID(correlation_id)
    assert response.headers["x-request-id"] == correlation_id


@pytest.mark.asyncio
async def test_uses_existing_correlation_id(app_with_logging: FastAPI) -> None:
    response = await get(app_with_logging, "/test", headers={"X-Request-ID": "req-123"})

    assert response.json()["correlation_id"] == "req-123"
    assert response.headers["x-request-id"] == "req-123"


@pytest.mark.asyncio
async def test_falls_back_to_lambda_request_id(app_with_logging: FastAPI) -> None:
    """Test the Lambda request ID from the Mangum scope is used when no header is sent."""

    async def asgi_with_lambda_context(scope, receive, send):
        scope["aws.context"] = SimpleNamespace(aws_request_id="lambda-req-1")
        await app_with_logging(scope, receive, send)

    async with AsyncClient(
        transport=ASGITransport(app=asgi_with_lambda_context), base_url="http://test"
    ) as client:
        response = await client.get("/test")

    assert response.json()["correlation_id"] == "lambda-req-1"


@pytest.mark.asyncio
async def test_logs_request_start_and_completion(app_with_logging: FastAPI) -> None:
    with patch("site_functions.middleware.logging.logger") as mock_logger:
        await get(app_with_logging, "/test", headers={"User-Agent": "pytest"})

    first_call, last_call = mock_logger.info.call_args_list[0], mock_logger.info.call_args_list[-1]
    assert "Request started" in first_call[0]
    assert first_call[1]["extra"]["context"]["user_agent"] == "pytest"
    assert "Request completed" in last_call[0]
    context = last_call[1]["extra"]["context"]
    assert context["status_code"] == 200
    assert context["response_time_ms"] >= 0


@pytest.mark.asyncio
async def test_logs_errors(app_with_logging: FastAPI) -> None:
    with patch("site_functions.middleware.logging.logger") as mock_logger:
        with contextlib.suppress(Exception):
            await get(app_with_logging, "/error")

    error_call = mock_logger.error.call_args_list[0]
    assert "Request failed with exception" in error_call[0]
    assert "exc_info" in error_call[1]


def format_record(logger_name: str, level: int, emit) -> dict:
    log_stream = StringIO()
    handler = logging.StreamHandler(log_stream)
    handler.setFormatter(JSONFormatter())

    logger = logging.getLogger(logger_name)
    logger.handlers = [handler]
    logger.propagate = False
    logger.setLevel(level)
    emit(logger)

    return json.loads(log_stream.getvalue().strip())


def test_json_formatter_output() -> None:
    log_data = format_record(
        "test_json_logger",
        logging.INFO,
        lambda logger: logger.info(
            "Test message",
            extra={"correlation_id": "test-correlation-id", "context": {"key": "value"}},
        ),
    )

    assert log_data["level"] == "INFO"
    assert log_data["message"] == "Test message"
    assert log_data["correlation_id"] == "test-correlation-id"
    assert log_data["key"] == "value"
    assert "timestamp" in log_data


def test_json_formatter_includes_exception_info() -> None:
    def emit(logger):
        try:
            raise ValueError("Test exception")
        except ValueError:
            logger.error("Error occurred", exc_info=True)

    log_data = format_record("test_exception_logger", logging.ERROR, emit)

    assert "ValueError" in log_data["exception"]
    assert "Test exception" in log_data["exception"]


def test_json_formatter_includes_lambda_function_name(monkeypatch) -> None:
    monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "site-submit-contact")

    log_data = format_record("test_lambda_logger", logging.INFO, lambda logger: logger.info("hi"))

    assert log_data["function"] == "site-submit-contact"


def test_json_formatter_debug_includes_location() -> None:
    log_data = format_record("test_debug_logger", logging.DEBUG, lambda logger: logger.debug("d"))

    assert "file" in log_data
    assert "line" in log_data
