"""HubSpot sync audit log repository."""

from site_functions.config import Settings, settings
from site_functions.models.hubspot_sync import HubSpotSyncLog
from site_functions.repositories.base import BaseRepository


class HubSpotSyncRepository(BaseRepository):
    """Append-only repository for the hubspot_syncs audit table."""

    def __init__(self, config: Settings | None = None) -> None:
        config = config or settings
        super().__init__(config.table_hubspot_syncs, config)

    async def record(self, entry: HubSpotSyncLog) -> None:
        """Append one audit row."""
        await self.insert(entry.model_dump(mode="json"))
