"""Route for the contact intake function."""

from fastapi import APIRouter, status

from site_functions.schemas.contact import ContactRequest, ContactResponse
from site_functions.services.contact_service import ContactService

PATH = "/submit-contact"

router = APIRouter(tags=["Contact"])


@router.post(
    PATH,
    response_model=ContactResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Missing field, invalid email or contact already exists",
            "content": {
                "application/json": {
                    "example": {
                        "status": False,
                        "error": "Contact already exists. We'll be in touch.",
                        "error_code": "CONTACT_EXISTS",
                    }
                }
            },
        },
        500: {"description": "Submission could not be stored"},
    },
)
async def submit_contact(contact_request: ContactRequest) -> ContactResponse:
    """
    Store a contact form submission.

    Args:
        contact_request: Contact form data

    Returns:
        ContactResponse echoing name, email and submission time

    Raises:
        ContactExistsError: If the email was already submitted (400)
        UpstreamServiceError: If the submission cannot be stored (500)
    """
    service = ContactService()
    return await service.submit(contact_request)
