from __future__ import annotations

import logging
from uuid import uuid4

from farmtrack.infrastructure.whatsapp.models import WhatsAppMessage, WhatsAppSender

logger = logging.getLogger(__name__)


class LoggingWhatsAppSender(WhatsAppSender):
    async def send(self, message: WhatsAppMessage) -> str | None:
        sid = f"log-{uuid4()}"
        logger.info(
            "Sending WhatsApp message (logging provider): sid=%s to=%s body_len=%s",
            sid,
            message.to,
            len(message.body),
        )
        return sid
