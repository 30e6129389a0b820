"""Visitor analytics service."""

from collections.abc import Mapping

from site_functions.config import Settings, settings
from site_functions.logging.config import get_logger
from site_functions.models.analytics_event import AnalyticsEvent
from site_functions.repositories.analytics_repository import AnalyticsRepository
from site_functions.schemas.analytics import TrackVisitorRequest, TrackVisitorResponse
from site_functions.utils.timestamps import utc_now_iso
from site_functions.utils.visitor import extract_visitor

logger = get_logger(__name__)

DEFAULT_EVENT_TYPE = "pageview"


class AnalyticsService:
    """
    Records page views without identifying visitors.

    Tracking is best-effort: if the event store cannot be reached the
    visitor still gets a 200, flagged ``tracked: false``.
    """

    def __init__(
        self,
        repository: AnalyticsRepository | None = None,
        config: Settings | None = None,
    ) -> None:
        self.config = config or settings
        self.repository = repository or AnalyticsRepository(self.config)

    async def track(
        self, request: TrackVisitorRequest, headers: Mapping[str, str]
    ) -> TrackVisitorResponse:
        """
        Store one analytics event.

        Args:
            request: Validated tracker payload
            headers: Request headers (user agent and geolocation)

        Returns:
            TrackVisitorResponse; never raises for store failures
        """
        visitor = extract_visitor(headers, request.user_agent)
        event = AnalyticsEvent(
            event_type=request.event or DEFAULT_EVENT_TYPE,
            page_path=request.page,
            referrer=request.referrer,
            session_id=request.session_id,
            country=visitor.country,
            browser=visitor.browser,
            device_type=visitor.device_type,
            created_at=utc_now_iso(),
        )

        try:
            await self.repository.create(event)
        except Exception as exc:
            logger.warning(
                f"Analytics failure: {exc}",
                exc_info=exc,
                extra={"context": {"page": request.page}},
            )
            return TrackVisitorResponse(tracked=False, message="analytics unavailable")

        logger.info(
            "Visitor tracked",
            extra={"context": {"page": request.page, "country": visitor.country}},
        )
        return TrackVisitorResponse(tracked=True)
