"""
Mail Transport Abstract Base Class

Defines the interface for delivering outbound email.
Supports both Mock (development) and SendGrid (production) implementations.

Author: El Sabor Web Team
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OutboundMessage:
    """A single email, built per submission and never stored."""
    sender: str
    recipient: str
    subject: str
    body_html: str


@dataclass
class NotificationResult:
    """Result from sending a message."""
    success: bool
    message_id: Optional[str] = None
    error_message: Optional[str] = None
    provider: str = "unknown"


class BaseMailTransport(ABC):
    """Abstract base class for mail transports."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name."""
        pass

    @abstractmethod
    async def send(self, message: OutboundMessage) -> NotificationResult:
        """Deliver one message. Failures are reported, not raised."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check service connectivity."""
        pass
