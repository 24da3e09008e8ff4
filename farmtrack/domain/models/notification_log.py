from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class NotificationChannel(str, Enum):
    EMAIL = "email"
    WHATSAPP = "whatsapp"


class DeliveryStatus(str, Enum):
    SENT = "sent"
    FAILED = "failed"


@dataclass(slots=True)
class NotificationLog:
    id: UUID
    account_id: UUID
    notification_type: str
    channel: str
    target: str
    message: str
    status: str
    provider_message_id: str | None = None
    error_message: str | None = None
    sent_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        account_id: UUID,
        notification_type: str,
        channel: NotificationChannel,
        target: str,
        message: str,
        status: DeliveryStatus,
        provider_message_id: str | None = None,
        error_message: str | None = None,
    ) -> NotificationLog:
        return cls(
            id=uuid4(),
            account_id=account_id,
            notification_type=notification_type,
            channel=channel.value,
            target=target,
            message=message,
            status=status.value,
            provider_message_id=provider_message_id,
            error_message=error_message,
            sent_at=datetime.now(timezone.utc),
        )
