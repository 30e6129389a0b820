"""HMAC-SHA256 signature verification for Cal.com webhooks."""

import hashlib
import hmac

from site_functions.exceptions import UnauthorizedError

SIGNATURE_HEADER = "x-cal-signature-256"


def compute_signature(secret: str, body: bytes) -> str:
    """
    Compute the hex HMAC-SHA256 digest Cal.com sends for ``body``.

    Args:
        secret: Webhook signing secret
        body: Exact raw request body

    Returns:
        Lowercase hex digest
    """
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def verify_signature(secret: str | None, body: bytes, signature: str | None) -> None:
    """
    Check a webhook body against its signature header.

    Must run before the body is parsed. The header must equal the hex
    digest exactly; surrounding whitespace or any non-ASCII character is a
    mismatch.

    Args:
        secret: Configured signing secret (None when unset)
        body: Exact raw request body
        signature: Value of the x-cal-signature-256 header

    Raises:
        UnauthorizedError: If the secret or header is missing, or they
            do not match
    """
    if not secret or not signature:
        raise UnauthorizedError("Unauthorized")

    expected = compute_signature(secret, body).encode("ascii")
    if not hmac.compare_digest(expected, signature.encode("utf-8", "surrogateescape")):
        raise UnauthorizedError("Invalid signature")
