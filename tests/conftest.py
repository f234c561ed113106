from __future__ import annotations

import os

os.environ["ENV_MODE"] = "development"
os.environ["EMAIL_USER"] = "reservas@elsabor.test"
os.environ["MOCK_EMAIL_FAILURE_RATE"] = "0"
os.environ["MOCK_EMAIL_LATENCY"] = "0"

from datetime import date, timedelta  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from elsabor.main import app  # noqa: E402
from elsabor.rate_limits import limiter  # noqa: E402
from elsabor.services.notifications import (  # noqa: E402
    MockMailTransport,
    NotificationResult,
    OutboundMessage,
    get_mail_transport,
)


class FlakyTransport(MockMailTransport):
    """Mock transport that fails on the given (1-based) send attempts."""

    def __init__(self, fail_on=(), raise_on=()):
        super().__init__()
        self.fail_on = set(fail_on)
        self.raise_on = set(raise_on)
        self.attempts: list[OutboundMessage] = []

    async def send(self, message: OutboundMessage) -> NotificationResult:
        self.attempts.append(message)
        attempt = len(self.attempts)
        if attempt in self.raise_on:
            raise ConnectionError("SMTP connection reset")
        if attempt in self.fail_on:
            return NotificationResult(success=False, error_message="rejected", provider="mock")
        return await super().send(message)


@pytest.fixture(autouse=True)
def outbox():
    transport = get_mail_transport()
    assert isinstance(transport, MockMailTransport)
    transport.clear()
    yield transport.outbox
    transport.clear()


@pytest.fixture(autouse=True)
def _reset_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _reset_rate_limit():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fecha_valida() -> date:
    """A reservation date safely after tomorrow."""
    return date.today() + timedelta(days=2)


@pytest.fixture
def reserva_data(fecha_valida):
    return {
        "nombre": "Ana",
        "email": "ana@example.com",
        "fecha": fecha_valida.isoformat(),
        "hora": "20:30",
        "personas": "4",
        "peticiones": "",
    }


@pytest.fixture
def contacto_data():
    return {
        "nombre": "Ana",
        "email": "ana@example.com",
        "mensaje": "¿Tenéis opciones sin gluten?",
    }
