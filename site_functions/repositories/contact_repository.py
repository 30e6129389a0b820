"""Contact submission repository."""

from postgrest.exceptions import APIError

from site_functions.config import Settings, settings
from site_functions.exceptions import ContactExistsError
from site_functions.models.contact import ContactSubmission
from site_functions.repositories.base import UNIQUE_VIOLATION, BaseRepository


class ContactRepository(BaseRepository):
    """Repository for the contacts table."""

    def __init__(self, config: Settings | None = None) -> None:
        config = config or settings
        super().__init__(config.table_contacts, config)

    async def create(self, contact: ContactSubmission) -> ContactSubmission:
        """
        Store a contact submission.

        Args:
            contact: Submission to store

        Returns:
            The stored submission

        Raises:
            ContactExistsError: If a contact with this email already exists
            APIError: For any other rejection by the database
        """
        try:
            await self.insert(contact.model_dump())
        except APIError as exc:
            if exc.code == UNIQUE_VIOLATION:
                raise ContactExistsError() from exc
            raise
        return contact
