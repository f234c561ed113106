"""
Mail Transport Factory

Returns Mock or SendGrid mail transport based on ENV_MODE.

Author: El Sabor Web Team
Version: 1.0.0
"""

import logging
from functools import lru_cache

from elsabor.core.config import get_settings
from elsabor.services.notifications.base import (
    BaseMailTransport,
    NotificationResult,
    OutboundMessage,
)
from elsabor.services.notifications.mock import MockMailTransport
from elsabor.services.notifications.real import SendGridMailTransport

logger = logging.getLogger(__name__)


@lru_cache()
def get_mail_transport() -> BaseMailTransport:
    """Get the configured mail transport."""
    settings = get_settings()

    if settings.is_development:
        logger.info("Mail Transport: Using MockMailTransport (development mode)")
        return MockMailTransport(
            failure_rate=settings.mock_email_failure_rate,
            latency=settings.mock_email_latency,
            outbox_size=settings.mock_email_outbox_size,
        )
    else:
        logger.info(f"Mail Transport: Using SendGridMailTransport ({settings.env_mode.value} mode)")
        return SendGridMailTransport()


def reset_mail_transport() -> None:
    """Clear the cached transport instance."""
    get_mail_transport.cache_clear()


__all__ = [
    "get_mail_transport",
    "reset_mail_transport",
    "BaseMailTransport",
    "MockMailTransport",
    "SendGridMailTransport",
    "NotificationResult",
    "OutboundMessage",
]
