"""HubSpot sync service."""

from site_functions.clients.hubspot import HubSpotClient, HubSpotConflictError
from site_functions.config import Settings, settings
from site_functions.exceptions import ConfigurationError, UpstreamServiceError
from site_functions.logging.config import get_logger
from site_functions.models.hubspot_sync import HubSpotSyncLog, SyncStatus
from site_functions.repositories.hubspot_sync_repository import HubSpotSyncRepository
from site_functions.schemas.hubspot import HubSpotSyncRequest, HubSpotSyncResponse
from site_functions.utils.timestamps import utc_now_iso

logger = get_logger(__name__)


class HubSpotSyncService:
    """
    Pushes website leads into HubSpot and audits every attempt.

    Outcomes:
    - created: audited as success, 200
    - 409 from HubSpot: audited as duplicate, 200 (not a client error)
    - anything else: audited as failed, 500

    Audit writes are best-effort and never change the outcome.
    """

    def __init__(
        self,
        client: HubSpotClient | None = None,
        audit_repository: HubSpotSyncRepository | None = None,
        config: Settings | None = None,
    ) -> None:
        """
        Initialize HubSpotSyncService.

        Args:
            client: HubSpotClient instance (creates new if None)
            audit_repository: HubSpotSyncRepository instance (creates new if None)
            config: Settings instance (defaults to global settings)
        """
        self.config = config or settings
        self.client = client or HubSpotClient(self.config)
        self.audit_repository = audit_repository or HubSpotSyncRepository(self.config)

    async def sync(self, request: HubSpotSyncRequest) -> HubSpotSyncResponse:
        """
        Create the lead as a HubSpot contact.

        Args:
            request: Validated lead data

        Returns:
            HubSpotSyncResponse for success or duplicate

        Raises:
            UpstreamServiceError: If HubSpot is not configured or the sync fails
        """
        properties = request.to_properties(self.config.hubspot_lead_source)

        try:
            result = await self.client.create_contact(properties)
        except HubSpotConflictError as exc:
            await self._audit(request.email, SyncStatus.DUPLICATE, error_message=exc.message)
            return HubSpotSyncResponse(
                message="Contact already exists in HubSpot",
                email=request.email,
            )
        except Exception as exc:
            if isinstance(exc, ConfigurationError):
                error_message = f"Missing {exc.setting}"
            else:
                error_message = str(exc) or type(exc).__name__
            logger.error(
                f"HubSpot sync failed: {error_message}",
                exc_info=exc,
                extra={"context": {"email": request.email}},
            )
            await self._audit(request.email, SyncStatus.FAILED, error_message=error_message)
            raise UpstreamServiceError(
                message="HubSpot sync failed", service="hubspot"
            ) from exc

        contact_id = result.get("id")
        contact_id = str(contact_id) if contact_id is not None else None

        await self._audit(request.email, SyncStatus.SUCCESS, contact_id=contact_id)
        logger.info(
            "HubSpot synced",
            extra={"context": {"email": request.email, "hubspot_contact_id": contact_id}},
        )

        return HubSpotSyncResponse(message="Synced to HubSpot", contactId=contact_id)

    async def _audit(
        self,
        email: str | None,
        status: SyncStatus,
        contact_id: str | None = None,
        error_message: str | None = None,
    ) -> None:
        entry = HubSpotSyncLog(
            email=email,
            hubspot_contact_id=contact_id,
            sync_status=status,
            error_message=error_message,
            synced_at=utc_now_iso(),
        )
        try:
            await self.audit_repository.record(entry)
        except Exception as exc:
            # Never let the audit trail mask the sync outcome
            logger.warning(
                "HubSpot sync audit write failed",
                exc_info=exc,
                extra={"context": {"sync_status": status.value}},
            )
