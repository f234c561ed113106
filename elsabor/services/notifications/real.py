"""
SendGrid Mail Transport

Production implementation delivering email through the SendGrid API.

Author: El Sabor Web Team
Version: 1.0.0
"""

import asyncio
import logging
from email.utils import parseaddr

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import From, Mail

from elsabor.core.config import get_settings
from elsabor.services.notifications.base import (
    BaseMailTransport,
    NotificationResult,
    OutboundMessage,
)

logger = logging.getLogger(__name__)


class SendGridMailTransport(BaseMailTransport):
    """Production mail transport using SendGrid."""

    def __init__(self):
        settings = get_settings()

        if settings.sendgrid_api_key:
            self.sendgrid_client = SendGridAPIClient(settings.sendgrid_api_key)
        else:
            self.sendgrid_client = None
            logger.warning("SendGrid credentials not configured")

        logger.info("SendGridMailTransport initialized")

    @property
    def provider_name(self) -> str:
        return "sendgrid"

    def _build_mail(self, message: OutboundMessage) -> Mail:
        name, address = parseaddr(message.sender)
        return Mail(
            from_email=From(address, name or None),
            to_emails=message.recipient,
            subject=message.subject,
            html_content=message.body_html,
        )

    async def send(self, message: OutboundMessage) -> NotificationResult:
        """Send email via SendGrid."""
        if not self.sendgrid_client:
            return NotificationResult(
                success=False,
                error_message="SendGrid not configured",
                provider="sendgrid"
            )

        try:
            mail = self._build_mail(message)
            # The SendGrid client is blocking
            response = await asyncio.to_thread(self.sendgrid_client.send, mail)

            logger.info(f"Email sent to {message.recipient}: {response.status_code}")

            return NotificationResult(
                success=response.status_code in [200, 201, 202],
                message_id=response.headers.get('X-Message-Id'),
                provider="sendgrid"
            )

        except Exception as e:
            logger.error(f"SendGrid error: {e}")
            return NotificationResult(
                success=False,
                error_message=str(e),
                provider="sendgrid"
            )

    async def health_check(self) -> bool:
        """SendGrid is usable once an API key is configured."""
        return self.sendgrid_client is not None
