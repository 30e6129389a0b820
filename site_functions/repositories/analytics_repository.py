"""Analytics event repository."""

from site_functions.config import Settings, settings
from site_functions.models.analytics_event import AnalyticsEvent
from site_functions.repositories.base import BaseRepository


class AnalyticsRepository(BaseRepository):
    """Append-only repository for the analytics_events table."""

    def __init__(self, config: Settings | None = None) -> None:
        config = config or settings
        super().__init__(config.table_analytics_events, config)

    async def create(self, event: AnalyticsEvent) -> AnalyticsEvent:
        """Insert one analytics event."""
        await self.insert(event.model_dump())
        return event
