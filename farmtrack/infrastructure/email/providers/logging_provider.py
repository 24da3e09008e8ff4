from __future__ import annotations

import logging
from uuid import uuid4

from farmtrack.infrastructure.email.models import EmailMessage, EmailService

logger = logging.getLogger(__name__)


class LoggingEmailService(EmailService):
    """Development provider: nothing leaves the process."""

    async def send(self, message: EmailMessage) -> str | None:
        message_id = f"log-{uuid4()}"
        logger.info(
            "Email not delivered (logging provider): id=%s to=%s subject=%r tags=%s",
            message_id,
            ",".join(message.to),
            message.subject,
            message.tags or {},
        )
        if message.text:
            logger.debug("Email body for %s:\n%s", message_id, message.text)
        return message_id
