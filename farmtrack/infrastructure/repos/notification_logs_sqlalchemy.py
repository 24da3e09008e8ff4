from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.interfaces.repositories.notification_logs import (
    NotificationLogRepository,
)
from farmtrack.domain.models.notification_log import NotificationLog
from farmtrack.infrastructure.db.orm.notification_log import NotificationLogORM


class NotificationLogsSQLAlchemyRepository(NotificationLogRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: NotificationLogORM) -> NotificationLog:
        return NotificationLog(
            id=orm.id,
            account_id=orm.account_id,
            notification_type=orm.notification_type,
            channel=orm.channel,
            target=orm.target,
            message=orm.message,
            status=orm.status,
            provider_message_id=orm.provider_message_id,
            error_message=orm.error_message,
            sent_at=orm.sent_at,
        )

    async def add(self, entry: NotificationLog) -> NotificationLog:
        orm = NotificationLogORM(
            id=entry.id,
            account_id=entry.account_id,
            notification_type=entry.notification_type,
            channel=entry.channel,
            target=entry.target,
            message=entry.message,
            status=entry.status,
            provider_message_id=entry.provider_message_id,
            error_message=entry.error_message,
            sent_at=entry.sent_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list(
        self,
        account_id: UUID,
        *,
        channel: str | None = None,
        status: str | None = None,
        limit: int = 50,
    ) -> list[NotificationLog]:
        stmt = select(NotificationLogORM).where(NotificationLogORM.account_id == account_id)
        if channel:
            stmt = stmt.where(NotificationLogORM.channel == channel)
        if status:
            stmt = stmt.where(NotificationLogORM.status == status)
        stmt = stmt.order_by(NotificationLogORM.sent_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
