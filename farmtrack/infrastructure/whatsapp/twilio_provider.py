from __future__ import annotations

import logging

import httpx

from farmtrack.application.errors import NotificationDeliveryError
from farmtrack.infrastructure.whatsapp.models import WhatsAppMessage, WhatsAppSender

logger = logging.getLogger(__name__)


def _whatsapp_address(number: str) -> str:
    return number if number.startswith("whatsapp:") else f"whatsapp:{number}"


class TwilioWhatsAppSender(WhatsAppSender):
    """Sends WhatsApp messages through the Twilio Messages REST resource."""

    def __init__(
        self,
        *,
        account_sid: str,
        auth_token: str,
        from_number: str,
        api_base: str = "https://api.twilio.com/2010-04-01",
        timeout: float = 30.0,
    ) -> None:
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def messages_url(self) -> str:
        return f"{self.api_base}/Accounts/{self.account_sid}/Messages.json"

    async def send(self, message: WhatsAppMessage) -> str | None:
        form = {
            "From": _whatsapp_address(self.from_number),
            "To": _whatsapp_address(message.to),
            "Body": message.body,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.messages_url,
                    data=form,
                    auth=(self.account_sid, self.auth_token),
                )
        except httpx.HTTPError as exc:
            logger.error("Twilio HTTP error: %s", exc)
            raise NotificationDeliveryError(
                f"Failed to send WhatsApp message via Twilio: {exc}",
                provider_error={"type": type(exc).__name__, "message": str(exc)},
            ) from exc

        try:
            result = response.json()
        except ValueError:
            result = {"raw": response.text}

        if response.status_code >= 300:
            logger.error("Twilio API error: %s - %s", response.status_code, response.text)
            raise NotificationDeliveryError(
                result.get("message") or f"Twilio API error: {response.status_code}",
                provider_error={"status_code": response.status_code, **result},
            )

        sid = result.get("sid")
        logger.info("WhatsApp message sent via Twilio: to=%s sid=%s", message.to, sid or "unknown")
        return sid
