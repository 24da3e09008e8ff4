from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.repositories.health_records import HealthRecordRepository
from farmtrack.domain.models.health_record import HealthRecord
from farmtrack.infrastructure.db.orm.health_record import HealthRecordORM


class HealthRecordsSQLAlchemyRepository(HealthRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HealthRecordORM) -> HealthRecord:
        return HealthRecord(
            id=orm.id,
            account_id=orm.account_id,
            animal_id=orm.animal_id,
            record_type=orm.record_type,
            title=orm.title,
            date=orm.date,
            description=orm.description,
            vet_name=orm.vet_name,
            cost=orm.cost,
            medications=list(orm.medications) if orm.medications is not None else None,
            follow_up_date=orm.follow_up_date,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, record: HealthRecord) -> HealthRecord:
        orm = HealthRecordORM(
            id=record.id,
            account_id=record.account_id,
            animal_id=record.animal_id,
            record_type=record.record_type,
            title=record.title,
            date=record.date,
            description=record.description,
            vet_name=record.vet_name,
            cost=record.cost,
            medications=record.medications,
            follow_up_date=record.follow_up_date,
            created_at=record.created_at,
            updated_at=record.updated_at,
            version=record.version,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, account_id: UUID, record_id: UUID) -> HealthRecord | None:
        stmt = (
            select(HealthRecordORM)
            .where(HealthRecordORM.account_id == account_id)
            .where(HealthRecordORM.id == record_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        account_id: UUID,
        *,
        animal_id: UUID | None = None,
        record_type: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[HealthRecord]:
        stmt = select(HealthRecordORM).where(HealthRecordORM.account_id == account_id)
        if animal_id:
            stmt = stmt.where(HealthRecordORM.animal_id == animal_id)
        if record_type:
            stmt = stmt.where(HealthRecordORM.record_type == record_type)
        if date_from:
            stmt = stmt.where(HealthRecordORM.date >= date_from)
        if date_to:
            stmt = stmt.where(HealthRecordORM.date <= date_to)
        stmt = stmt.order_by(HealthRecordORM.date.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, record: HealthRecord) -> HealthRecord:
        orm = await self.session.get(HealthRecordORM, record.id)
        if not orm or orm.account_id != record.account_id:
            raise NotFound("Health record not found")
        orm.record_type = record.record_type
        orm.title = record.title
        orm.date = record.date
        orm.description = record.description
        orm.vet_name = record.vet_name
        orm.cost = record.cost
        orm.medications = record.medications
        orm.follow_up_date = record.follow_up_date
        orm.updated_at = record.updated_at
        orm.version = record.version
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, account_id: UUID, record_id: UUID) -> bool:
        stmt = (
            delete(HealthRecordORM)
            .where(HealthRecordORM.account_id == account_id)
            .where(HealthRecordORM.id == record_id)
            .returning(HealthRecordORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
