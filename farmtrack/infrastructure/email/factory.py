from __future__ import annotations

import logging

from farmtrack.config.settings import Settings
from farmtrack.infrastructure.email.models import EmailService
from farmtrack.infrastructure.email.providers.logging_provider import LoggingEmailService
from farmtrack.infrastructure.email.providers.resend_provider import ResendEmailService

logger = logging.getLogger(__name__)


def build_email_service(settings: Settings) -> EmailService:
    provider = (settings.email_provider or "logging").lower()
    if provider == "resend":
        if settings.resend_api_key is None:
            logger.warning("EMAIL_PROVIDER=resend without RESEND_API_KEY; using logging provider")
            return LoggingEmailService()
        return ResendEmailService(
            api_key=settings.resend_api_key.get_secret_value(),
            api_url=settings.resend_api_url,
        )
    return LoggingEmailService()
