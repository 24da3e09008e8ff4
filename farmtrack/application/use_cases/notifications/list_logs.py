from __future__ import annotations

from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.notification_log import NotificationLog


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    *,
    channel: str | None = None,
    status: str | None = None,
    limit: int = 50,
) -> list[NotificationLog]:
    return await uow.notification_logs.list(
        account_id, channel=channel, status=status, limit=min(max(limit, 1), 200)
    )
