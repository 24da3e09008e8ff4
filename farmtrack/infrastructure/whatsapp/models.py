from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class WhatsAppMessage:
    to: str  # E.164, e.g. +905321234567
    body: str


class WhatsAppSender:
    async def send(self, message: WhatsAppMessage) -> str | None:  # pragma: no cover - interface
        """Deliver `message` and return the provider message sid."""
        raise NotImplementedError
