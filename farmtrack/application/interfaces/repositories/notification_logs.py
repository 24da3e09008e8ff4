from __future__ import annotations

from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.notification_log import NotificationLog


class NotificationLogRepository(Protocol):
    async def add(self, entry: NotificationLog) -> NotificationLog: ...

    async def list(
        self,
        account_id: UUID,
        *,
        channel: str | None = None,
        status: str | None = None,
        limit: int = 50,
    ) -> list[NotificationLog]: ...
