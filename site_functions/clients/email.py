"""Contact notification emails sent through Resend."""

import asyncio
from html import escape

import resend

from site_functions.config import Settings, settings
from site_functions.logging.config import get_logger
from site_functions.models.contact import ContactSubmission

logger = get_logger(__name__)


def _render_contact_html(contact: ContactSubmission) -> str:
    rows = [
        ("Name", contact.name),
        ("Email", contact.email),
        ("Company", contact.company or "-"),
        ("Phone", contact.phone or "-"),
    ]
    table = "".join(
        f"<tr><td><strong>{label}</strong></td><td>{escape(value)}</td></tr>"
        for label, value in rows
    )
    message = escape(contact.message).replace("\n", "<br>")
    return (
        "<h2>New contact form submission</h2>"
        f"<table>{table}</table>"
        f"<p>{message}</p>"
    )


async def send_contact_notification(
    contact: ContactSubmission, config: Settings | None = None
) -> bool:
    """
    Email the site owner about a new contact submission.

    Best-effort: returns False instead of raising when the email cannot be
    sent, and does nothing when Resend is not configured.

    Args:
        contact: The stored submission
        config: Settings holding the Resend credentials and recipient

    Returns:
        True if Resend accepted the email
    """
    config = config or settings
    if not config.notifications_enabled:
        return False

    resend.api_key = config.resend_api_key
    params = {
        "from": config.resend_from_email,
        "to": [config.contact_notification_email],
        "reply_to": contact.email,
        "subject": f"New contact from {contact.name}",
        "html": _render_contact_html(contact),
    }

    try:
        # The Resend SDK is synchronous
        await asyncio.to_thread(resend.Emails.send, params)
    except Exception as exc:
        logger.warning(
            "Contact notification failed",
            exc_info=exc,
            extra={"context": {"error": str(exc)}},
        )
        return False

    logger.info("Contact notification sent")
    return True
