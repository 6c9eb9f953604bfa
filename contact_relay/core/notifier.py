"""
Delivery interface for contact notifications.

The contact endpoint only knows how to hand a structured message to a
Notifier; which messaging backend sits behind it is decided here.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends

from contact_relay.core.config import Settings, get_settings
from contact_relay.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Sends one structured message to one configured destination."""

    @abstractmethod
    async def send(self, message: Dict[str, Any]) -> None:
        """
        Deliver a message.

        Raises:
            DeliveryError: when the backend rejects or cannot be reached
        """


def get_notifier(settings: Settings = Depends(get_settings)) -> Notifier:
    """
    Build the Slack notifier from settings.

    Fails fast with ConfigurationError when the credential or channel is
    missing, or the footer timezone is unknown, before any request body is
    looked at.
    """
    if not settings.is_slack_configured:
        logger.error(f"❌ {' and '.join(settings.missing_slack_settings())} not configured")
        raise ConfigurationError("Slack notifier is not configured")

    try:
        ZoneInfo(settings.notification_timezone)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.error(f"❌ NOTIFICATION_TIMEZONE '{settings.notification_timezone}' is not a known time zone")
        raise ConfigurationError("Notification timezone is not valid")

    from contact_relay.core.slack import SlackNotifier

    return SlackNotifier(
        token=settings.slack_token,
        channel_id=settings.slack_channel_id,
        api_url=settings.slack_api_url,
        timeout=settings.slack_timeout,
    )
