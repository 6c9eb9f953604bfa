"""
Contact form endpoint.

Validates the submitted fields and relays them to Slack as a single
notification. Nothing is stored.
"""

from fastapi import APIRouter, Depends, Request, status
from typing import Any, Dict
import logging

from contact_relay.core.config import Settings, get_settings
from contact_relay.core.errors import ContactValidationError, DeliveryError, FieldError
from contact_relay.core.notifier import Notifier, get_notifier
from contact_relay.core.slack import format_contact_message
from contact_relay.models.contact import INVALID_BODY_MESSAGE, validate_contact

router = APIRouter()
logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Your message has been sent successfully!"


@router.post("/contact", status_code=status.HTTP_200_OK)
async def submit_contact(
    request: Request,
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Relay a contact form submission to the configured Slack channel.

    Body: ``{"name": ..., "email": ..., "message": ...}``

    Returns:
        dict: success flag and a confirmation message
    """
    try:
        body = await request.json()
    except ValueError:
        raise ContactValidationError([FieldError(field="body", message=INVALID_BODY_MESSAGE)])

    data = validate_contact(body)
    message = format_contact_message(data, timezone=settings.notification_timezone)

    try:
        await notifier.send(message)
    except Exception as e:
        logger.error(f"❌ Error sending contact from {data.email} to Slack: {str(e)}")
        raise DeliveryError("Contact notification was not delivered") from e

    logger.info(f"📨 Contact form submission from {data.email} relayed")
    return {"success": True, "message": SUCCESS_MESSAGE}
