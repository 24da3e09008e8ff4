from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


def format_sender(address: str, name: str | None = None) -> str:
    """``FarmTrack <alerts@farm.example>`` or the bare address."""
    return f"{name} <{address}>" if name else address


@dataclass(slots=True)
class EmailMessage:
    subject: str
    to: list[str] = field(default_factory=list)
    text: str | None = None
    html: str | None = None
    sender: str | None = None
    # Provider-side labels, e.g. {"notification_type": "calving"}
    tags: dict[str, str] = field(default_factory=dict)


class EmailService(ABC):
    @abstractmethod
    async def send(self, message: EmailMessage) -> str | None:
        """Deliver ``message``; returns the provider message id when there is one.

        Raises ``NotificationDeliveryError`` when the provider refuses it.
        """
