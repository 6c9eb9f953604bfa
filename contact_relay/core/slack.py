"""
Slack backend for contact notifications.

Formats a ContactSubmission as Block Kit blocks and posts it to a single
channel through the chat.postMessage Web API method.
"""

import httpx
import logging
from datetime import datetime
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from contact_relay.core.errors import DeliveryError
from contact_relay.core.notifier import Notifier
from contact_relay.models.contact import ContactSubmission

logger = logging.getLogger(__name__)

HEADER_TEXT = "💬 New Contact Form Submission"

# Fixed English names, the footer must not follow the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_timestamp(moment: datetime) -> str:
    """Long British date and short time, e.g. '18 October 2026 at 14:05'"""
    return f"{moment.day} {MONTH_NAMES[moment.month - 1]} {moment.year} at {moment.hour:02d}:{moment.minute:02d}"


def format_contact_message(
    data: ContactSubmission,
    timezone: str = "Europe/Istanbul",
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Render a submission as a Slack message payload.

    Args:
        data: The validated submission
        timezone: IANA zone the footer timestamp is shown in
        now: Submission time (defaults to the current time)

    Returns:
        dict: ``text`` fallback plus Block Kit ``blocks``
    """
    zone = ZoneInfo(timezone)
    moment = now.astimezone(zone) if now else datetime.now(zone)

    return {
        "text": f"New contact from {data.name}",
        "blocks": [
            {
                "type": "header",
                "text": {
                    "type": "plain_text",
                    "text": HEADER_TEXT,
                    "emoji": True,
                },
            },
            {
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*Name:*\n{data.name}"},
                    {"type": "mrkdwn", "text": f"*Email:*\n{data.email}"},
                ],
            },
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": f"*Message:*\n{data.message}"},
            },
            {
                "type": "context",
                "elements": [
                    {"type": "mrkdwn", "text": f"📅 {format_timestamp(moment)}"},
                ],
            },
        ],
    }


class SlackNotifier(Notifier):
    """Posts messages to one Slack channel with a bot token."""

    def __init__(
        self,
        token: str,
        channel_id: str,
        api_url: str = "https://slack.com/api",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.channel_id = channel_id
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def send(self, message: Dict[str, Any]) -> None:
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json; charset=utf-8",
        }
        payload = {"channel": self.channel_id, **message}

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    f"{self.api_url}/chat.postMessage",
                    json=payload,
                    headers=headers,
                    timeout=self.timeout,
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise DeliveryError(f"Slack request failed: {str(e)}") from e
        except ValueError as e:
            raise DeliveryError(f"Slack returned a non-JSON response: {str(e)}") from e

        # Slack answers 200 even for rejected calls
        if not isinstance(data, dict):
            raise DeliveryError(f"Slack returned an unexpected response: {data!r}")
        if not data.get("ok"):
            raise DeliveryError(f"Slack rejected the message: {data.get('error', 'unknown_error')}")

        logger.info(f"✅ Message posted to Slack channel {self.channel_id} (ts={data.get('ts')})")
