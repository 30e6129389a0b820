"""Route for the Cal.com webhook function."""

from fastapi import APIRouter, Header, Request, status

from site_functions.schemas.webhook import WebhookResponse
from site_functions.services.booking_service import BookingService
from site_functions.utils.signature import SIGNATURE_HEADER

PATH = "/calcom-webhook"

router = APIRouter(tags=["Webhooks"])


@router.post(
    PATH,
    response_model=WebhookResponse,
    status_code=status.HTTP_200_OK,
    responses={
        401: {"description": "Missing or invalid x-cal-signature-256"},
        500: {"description": "Verified delivery could not be applied"},
    },
)
async def calcom_webhook(
    request: Request,
    signature: str | None = Header(None, alias=SIGNATURE_HEADER),
) -> WebhookResponse:
    """
    Receive a Cal.com booking webhook.

    The body is read as raw bytes so the signature is checked against
    exactly what Cal.com signed; it is only parsed afterwards.

    Args:
        request: FastAPI request (raw body source)
        signature: HMAC-SHA256 hex digest sent by Cal.com

    Returns:
        WebhookResponse naming the processed trigger event

    Raises:
        UnauthorizedError: If the signature is missing or wrong (401)
        WebhookProcessingError: If processing fails after verification (500)
    """
    raw_body = await request.body()
    service = BookingService()
    return await service.process_webhook(raw_body, signature)
