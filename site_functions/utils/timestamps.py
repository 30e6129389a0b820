"""Timestamp helpers."""

from datetime import UTC, datetime


def utc_now_iso() -> str:
    """Current UTC time as ISO 8601 with a trailing Z."""
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")
