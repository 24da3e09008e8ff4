from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from datetime import date
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from farmtrack.application.errors import NotificationDeliveryError
from farmtrack.config.settings import Settings
from farmtrack.infrastructure.db import orm  # noqa: F401
from farmtrack.infrastructure.db.base import Base
from farmtrack.infrastructure.email.models import EmailMessage, EmailService
from farmtrack.infrastructure.whatsapp.models import WhatsAppMessage, WhatsAppSender
from farmtrack.interfaces.http.deps import get_today
from farmtrack.interfaces.http.main import create_app

CRON_SECRET = "cron-test-secret"
TODAY = date(2024, 7, 15)


class RecordingEmailService(EmailService):
    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> str | None:
        self.sent.append(message)
        return f"email-{len(self.sent)}"


class FailingEmailService(EmailService):
    def __init__(self) -> None:
        self.attempts = 0

    async def send(self, message: EmailMessage) -> str | None:
        self.attempts += 1
        raise NotificationDeliveryError(
            "Email provider rejected the message",
            provider_error={"statusCode": 422, "name": "validation_error"},
        )


class RecordingWhatsAppSender(WhatsAppSender):
    def __init__(self) -> None:
        self.sent: list[WhatsAppMessage] = []

    async def send(self, message: WhatsAppMessage) -> str | None:
        self.sent.append(message)
        return f"SM{len(self.sent):04d}"


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
            "timezone": "UTC",
            "cron_secret_key": CRON_SECRET,
        }
    )


@pytest.fixture()
def email_service() -> RecordingEmailService:
    return RecordingEmailService()


@pytest.fixture()
def whatsapp_sender() -> RecordingWhatsAppSender:
    return RecordingWhatsAppSender()


@pytest.fixture()
def app(test_settings: Settings, email_service, whatsapp_sender):
    app = create_app(
        settings=test_settings,
        email_service=email_service,
        whatsapp_sender=whatsapp_sender,
    )
    app.dependency_overrides[get_today] = lambda: TODAY
    return app


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    await engine.dispose()


@pytest.fixture()
def account_id() -> UUID:
    return uuid4()


@pytest.fixture()
def token_factory(app) -> Callable[[UUID], str]:
    def _make(subject: UUID) -> str:
        return app.state.jwt_service.issue(subject)

    return _make


@pytest.fixture()
def auth_headers(token_factory, account_id: UUID) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_factory(account_id)}"}


@pytest.fixture()
def cron_secret() -> str:
    return CRON_SECRET


@pytest.fixture()
def failing_email_service(app) -> FailingEmailService:
    service = FailingEmailService()
    app.state.email_service = service
    return service
