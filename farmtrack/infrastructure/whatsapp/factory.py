from __future__ import annotations

from farmtrack.config.settings import Settings
from farmtrack.infrastructure.whatsapp.logging_provider import LoggingWhatsAppSender
from farmtrack.infrastructure.whatsapp.models import WhatsAppSender
from farmtrack.infrastructure.whatsapp.twilio_provider import TwilioWhatsAppSender


def build_whatsapp_sender(settings: Settings) -> WhatsAppSender:
    if not settings.twilio_configured:
        return LoggingWhatsAppSender()
    return TwilioWhatsAppSender(
        account_sid=settings.twilio_account_sid,
        auth_token=settings.twilio_auth_token.get_secret_value(),
        from_number=settings.twilio_whatsapp_from,
        api_base=settings.twilio_api_base,
    )
