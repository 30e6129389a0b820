"""Custom exception classes for the site functions."""

from typing import Any


class SiteFunctionError(Exception):
    """Base exception for site functions."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}


class ContactExistsError(SiteFunctionError):
    """Raised when a contact with the same email is already stored (400)."""

    def __init__(
        self,
        message: str = "Contact already exists. We'll be in touch.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="CONTACT_EXISTS",
            details=details,
        )


class UnauthorizedError(SiteFunctionError):
    """Raised when webhook signature verification fails (401)."""

    def __init__(
        self,
        message: str = "Unauthorized",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize UnauthorizedError.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=401,
            error_code="UNAUTHORIZED",
            details=details,
        )


class ConfigurationError(SiteFunctionError):
    """Raised when a required credential is not configured (500)."""

    def __init__(
        self,
        message: str = "Service is not configured",
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ConfigurationError.

        Args:
            message: Error message
            setting: Name of the missing environment variable
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=500,
            error_code="CONFIGURATION_ERROR",
            details=details,
        )
        # Kept off the response body; only used for logging
        self.setting = setting


class UpstreamServiceError(SiteFunctionError):
    """Raised when a dependent service rejects or fails a call (500)."""

    def __init__(
        self,
        message: str = "Upstream service failed",
        service: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize UpstreamServiceError.

        Args:
            message: Error message returned to the client
            service: Name of the failing service
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=500,
            error_code="UPSTREAM_ERROR",
            details=details,
        )
        self.service = service


class WebhookProcessingError(SiteFunctionError):
    """Raised when a verified webhook cannot be parsed or applied (500)."""

    def __init__(
        self,
        message: str = "Webhook processing failed",
        event: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize WebhookProcessingError.

        Args:
            message: Error message
            event: Trigger event being processed, if it was parsed
            details: Additional error details
        """
        super().__init__(
            message=message,
            status_code=500,
            error_code="WEBHOOK_PROCESSING_FAILED",
            details=details,
        )
        self.event = event
