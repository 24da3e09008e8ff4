from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.repositories.pregnancy_reminders import (
    PregnancyReminderRepository,
)
from farmtrack.domain.models.pregnancy_reminder import PregnancyReminder
from farmtrack.infrastructure.db.orm.pregnancy_reminder import PregnancyReminderORM


class PregnancyRemindersSQLAlchemyRepository(PregnancyReminderRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: PregnancyReminderORM) -> PregnancyReminder:
        return PregnancyReminder(
            id=orm.id,
            account_id=orm.account_id,
            insemination_id=orm.insemination_id,
            reminder_type=orm.reminder_type,
            reminder_date=orm.reminder_date,
            is_sent=orm.is_sent,
            created_at=orm.created_at,
        )

    async def add(self, reminder: PregnancyReminder) -> PregnancyReminder:
        orm = PregnancyReminderORM(
            id=reminder.id,
            account_id=reminder.account_id,
            insemination_id=reminder.insemination_id,
            reminder_type=reminder.reminder_type,
            reminder_date=reminder.reminder_date,
            is_sent=reminder.is_sent,
            created_at=reminder.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, account_id: UUID, reminder_id: UUID) -> PregnancyReminder | None:
        stmt = (
            select(PregnancyReminderORM)
            .where(PregnancyReminderORM.account_id == account_id)
            .where(PregnancyReminderORM.id == reminder_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        account_id: UUID,
        *,
        insemination_id: UUID | None = None,
        is_sent: bool | None = None,
    ) -> list[PregnancyReminder]:
        stmt = select(PregnancyReminderORM).where(PregnancyReminderORM.account_id == account_id)
        if insemination_id:
            stmt = stmt.where(PregnancyReminderORM.insemination_id == insemination_id)
        if is_sent is not None:
            stmt = stmt.where(PregnancyReminderORM.is_sent.is_(is_sent))
        stmt = stmt.order_by(PregnancyReminderORM.reminder_date)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, reminder: PregnancyReminder) -> PregnancyReminder:
        orm = await self.session.get(PregnancyReminderORM, reminder.id)
        if not orm or orm.account_id != reminder.account_id:
            raise NotFound("Reminder not found")
        orm.reminder_date = reminder.reminder_date
        orm.is_sent = reminder.is_sent
        await self.session.flush()
        return self._to_domain(orm)

    async def delete_for_insemination(self, account_id: UUID, insemination_id: UUID) -> int:
        stmt = (
            delete(PregnancyReminderORM)
            .where(PregnancyReminderORM.account_id == account_id)
            .where(PregnancyReminderORM.insemination_id == insemination_id)
            .returning(PregnancyReminderORM.id)
        )
        result = await self.session.execute(stmt)
        return len(result.scalars().all())
