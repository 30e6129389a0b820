"""Contact intake service."""

from collections.abc import Awaitable, Callable

from site_functions.clients.email import send_contact_notification
from site_functions.config import Settings, settings
from site_functions.exceptions import (
    ContactExistsError,
    SiteFunctionError,
    UpstreamServiceError,
)
from site_functions.logging.config import get_logger
from site_functions.models.contact import ContactSubmission
from site_functions.repositories.contact_repository import ContactRepository
from site_functions.schemas.contact import (
    ContactRequest,
    ContactResponse,
    SubmittedContact,
)
from site_functions.utils.timestamps import utc_now_iso

logger = get_logger(__name__)

Notifier = Callable[[ContactSubmission, Settings], Awaitable[bool]]


class ContactService:
    """
    Stores contact form submissions.

    A duplicate email is reported to the visitor as a friendly 400 rather
    than a server error. The notification email, when configured, is sent
    only after the row is stored and never affects the response.
    """

    def __init__(
        self,
        repository: ContactRepository | None = None,
        notifier: Notifier | None = None,
        config: Settings | None = None,
    ) -> None:
        """
        Initialize ContactService.

        Args:
            repository: ContactRepository instance (creates new if None)
            notifier: Coroutine that emails the site owner
            config: Settings instance (defaults to global settings)
        """
        self.config = config or settings
        self.repository = repository or ContactRepository(self.config)
        self.notifier = notifier or send_contact_notification

    async def submit(self, request: ContactRequest) -> ContactResponse:
        """
        Store a submission and optionally notify the site owner.

        Args:
            request: Validated contact form data

        Returns:
            ContactResponse echoing the stored submission

        Raises:
            ContactExistsError: If the email is already stored (400)
            UpstreamServiceError: If the database write fails (500)
        """
        submitted_at = utc_now_iso()
        contact = ContactSubmission(
            name=request.name,
            email=request.email,
            message=request.message,
            company=request.company,
            phone=request.phone,
            created_at=submitted_at,
        )

        try:
            await self.repository.create(contact)
        except ContactExistsError:
            logger.info(
                "Contact already exists",
                extra={"context": {"email": contact.email}},
            )
            raise
        except SiteFunctionError:
            raise
        except Exception as exc:
            logger.error(
                f"Contact insert failed: {exc}",
                exc_info=exc,
                extra={"context": {"email": contact.email}},
            )
            raise UpstreamServiceError(
                message="Failed to save submission", service="supabase"
            ) from exc

        logger.info("Contact stored", extra={"context": {"email": contact.email}})

        await self.notifier(contact, self.config)

        return ContactResponse(
            message="Contact stored successfully",
            data=SubmittedContact(
                name=contact.name,
                email=contact.email,
                submittedAt=submitted_at,
            ),
        )
