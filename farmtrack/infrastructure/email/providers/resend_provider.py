from __future__ import annotations

import logging
from typing import Any

import httpx

from farmtrack.application.errors import NotificationDeliveryError
from farmtrack.infrastructure.email.models import EmailMessage, EmailService

logger = logging.getLogger(__name__)


class ResendEmailService(EmailService):
    """Resend transactional email API."""

    def __init__(
        self,
        *,
        api_key: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 30.0,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout

    def _build_payload(self, message: EmailMessage) -> dict[str, Any]:
        if not message.sender:
            raise NotificationDeliveryError("Email has no sender address")
        payload: dict[str, Any] = {
            "from": message.sender,
            "to": message.to,
            "subject": message.subject,
        }
        if message.html:
            payload["html"] = message.html
        if message.text:
            payload["text"] = message.text
        if message.tags:
            payload["tags"] = [{"name": k, "value": v} for k, v in message.tags.items()]
        return payload

    async def send(self, message: EmailMessage) -> str | None:
        """
        Send an email through Resend.

        Returns:
            The Resend message id.

        Raises:
            NotificationDeliveryError: transport failure or a non-2xx answer; the
                provider's response body is kept on ``provider_error``.
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url, json=self._build_payload(message), headers=headers
                )
        except httpx.HTTPError as exc:
            logger.error("Resend HTTP error: %s", exc)
            raise NotificationDeliveryError(
                f"Failed to send email via Resend: {exc}",
                provider_error={"type": type(exc).__name__, "message": str(exc)},
            ) from exc

        try:
            result = response.json()
        except ValueError:
            result = {"raw": response.text}

        if response.status_code >= 300:
            logger.error("Resend API error: %s - %s", response.status_code, response.text)
            raise NotificationDeliveryError(
                result.get("message") or f"Resend API error: {response.status_code}",
                provider_error={"status_code": response.status_code, **result},
            )

        message_id = result.get("id")
        logger.info(
            "Email sent successfully via Resend: subject=%s to=%s id=%s",
            message.subject,
            ",".join(message.to),
            message_id or "unknown",
        )
        return message_id
