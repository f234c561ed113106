"""
Mock Mail Transport

Simulates email delivery for development and tests.
No actual messages are sent - they are logged and the most recent ones
are kept in ``outbox``.

Author: El Sabor Web Team
Version: 1.0.0
"""

import asyncio
import logging
import random
import uuid
from collections import deque

from elsabor.services.notifications.base import (
    BaseMailTransport,
    NotificationResult,
    OutboundMessage,
)

logger = logging.getLogger(__name__)


class MockMailTransport(BaseMailTransport):
    """Mock mail transport for development."""

    def __init__(self, failure_rate: float = 0.0, latency: float = 0.0, outbox_size: int = 50):
        self.failure_rate = failure_rate
        self.latency = latency
        self.outbox: deque[OutboundMessage] = deque(maxlen=outbox_size)
        logger.info(f"MockMailTransport initialized (failure_rate={failure_rate:.0%})")

    @property
    def provider_name(self) -> str:
        return "mock"

    async def _simulate_latency(self) -> None:
        """Simulate network latency."""
        if self.latency:
            await asyncio.sleep(random.uniform(0, self.latency))

    def _should_fail(self) -> bool:
        return random.random() < self.failure_rate

    async def send(self, message: OutboundMessage) -> NotificationResult:
        """Simulate sending an email."""
        await self._simulate_latency()

        if self._should_fail():
            logger.warning(f"Mock email failed (simulated) to {message.recipient}")
            return NotificationResult(
                success=False,
                error_message="Simulated email failure",
                provider="mock"
            )

        self.outbox.append(message)
        message_id = f"email_mock_{uuid.uuid4().hex[:12]}"
        logger.info(f"Mock email sent to {message.recipient}: {message.subject} (ID: {message_id})")

        return NotificationResult(
            success=True,
            message_id=message_id,
            provider="mock"
        )

    def clear(self) -> None:
        self.outbox.clear()

    async def health_check(self) -> bool:
        """Mock always returns healthy."""
        return True
