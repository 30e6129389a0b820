"""Base repository class with common Supabase table operations."""

from typing import Any

from supabase import AsyncClient, acreate_client

from site_functions.config import Settings, settings
from site_functions.exceptions import ConfigurationError
from site_functions.logging.config import get_logger

logger = get_logger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


async def get_supabase_client(config: Settings | None = None) -> AsyncClient:
    """
    Build a Supabase client for a single invocation.

    Uses the service-role key, so row level security is bypassed; the
    key must never reach the browser.

    Args:
        config: Settings to read credentials from (defaults to global settings)

    Returns:
        A fresh async Supabase client

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_SERVICE_KEY is unset
    """
    config = config or settings

    if not config.supabase_url:
        raise ConfigurationError(setting="SUPABASE_URL")
    if not config.supabase_service_key:
        raise ConfigurationError(setting="SUPABASE_SERVICE_KEY")

    return await acreate_client(config.supabase_url, config.supabase_service_key)


class BaseRepository:
    """
    Base repository providing common Supabase table operations.

    A client is created per operation; nothing is pooled or reused between
    invocations.
    """

    def __init__(self, table_name: str, config: Settings | None = None) -> None:
        """
        Initialize repository with table name.

        Args:
            table_name: Name of the Supabase table
            config: Settings holding the Supabase credentials
        """
        self.table_name = table_name
        self.config = config or settings

    async def insert(self, row: dict[str, Any]) -> list[dict[str, Any]]:
        """
        Insert one row.

        Args:
            row: Column name to value mapping

        Returns:
            Rows returned by PostgREST

        Raises:
            postgrest.exceptions.APIError: If the insert is rejected
        """
        client = await get_supabase_client(self.config)
        response = await client.table(self.table_name).insert(row).execute()
        logger.debug(
            "Row inserted",
            extra={"context": {"table": self.table_name}},
        )
        return response.data

    async def update_where(
        self, values: dict[str, Any], column: str, value: Any
    ) -> list[dict[str, Any]]:
        """
        Update every row whose ``column`` equals ``value``.

        Args:
            values: Column name to new value mapping
            column: Column to match on
            value: Value to match

        Returns:
            Updated rows returned by PostgREST (empty if nothing matched)
        """
        client = await get_supabase_client(self.config)
        response = await (
            client.table(self.table_name).update(values).eq(column, value).execute()
        )
        logger.debug(
            "Rows updated",
            extra={
                "context": {
                    "table": self.table_name,
                    "column": column,
                    "matched": len(response.data or []),
                }
            },
        )
        return response.data
