from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.errors import ConflictError, NotFound
from farmtrack.application.interfaces.repositories.milk_productions import (
    MilkProductionsRepository,
)
from farmtrack.domain.models.milk_production import MilkProduction
from farmtrack.infrastructure.db.orm.milk_production import MilkProductionORM

DUPLICATE_DAY_MESSAGE = (
    "A milk record already exists for this animal on this date. "
    "Edit the existing record instead."
)


class MilkProductionsSQLAlchemyRepository(MilkProductionsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MilkProductionORM) -> MilkProduction:
        return MilkProduction(
            id=orm.id,
            account_id=orm.account_id,
            animal_id=orm.animal_id,
            date=orm.date,
            morning_amount=orm.morning_amount,
            evening_amount=orm.evening_amount,
            total_amount=orm.total_amount,
            quality=orm.quality,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, production: MilkProduction) -> MilkProduction:
        orm = MilkProductionORM(
            id=production.id,
            account_id=production.account_id,
            animal_id=production.animal_id,
            date=production.date,
            morning_amount=production.morning_amount,
            evening_amount=production.evening_amount,
            total_amount=production.total_amount,
            quality=production.quality,
            notes=production.notes,
            created_at=production.created_at,
            updated_at=production.updated_at,
            version=production.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                DUPLICATE_DAY_MESSAGE,
                details={"animal_id": str(production.animal_id), "date": production.date.isoformat()},
            ) from exc
        return self._to_domain(orm)

    async def get(self, account_id: UUID, production_id: UUID) -> MilkProduction | None:
        stmt = (
            select(MilkProductionORM)
            .where(MilkProductionORM.account_id == account_id)
            .where(MilkProductionORM.id == production_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        account_id: UUID,
        *,
        animal_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[MilkProduction]:
        stmt = select(MilkProductionORM).where(MilkProductionORM.account_id == account_id)
        if animal_id:
            stmt = stmt.where(MilkProductionORM.animal_id == animal_id)
        if date_from:
            stmt = stmt.where(MilkProductionORM.date >= date_from)
        if date_to:
            stmt = stmt.where(MilkProductionORM.date <= date_to)
        stmt = stmt.order_by(MilkProductionORM.date.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, production: MilkProduction) -> MilkProduction:
        orm = await self.session.get(MilkProductionORM, production.id)
        if not orm or orm.account_id != production.account_id:
            raise NotFound("Milk production not found")
        orm.date = production.date
        orm.morning_amount = production.morning_amount
        orm.evening_amount = production.evening_amount
        orm.total_amount = production.total_amount
        orm.quality = production.quality
        orm.notes = production.notes
        orm.updated_at = production.updated_at
        orm.version = production.version
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(DUPLICATE_DAY_MESSAGE) from exc
        return self._to_domain(orm)

    async def delete(self, account_id: UUID, production_id: UUID) -> bool:
        stmt = (
            delete(MilkProductionORM)
            .where(MilkProductionORM.account_id == account_id)
            .where(MilkProductionORM.id == production_id)
            .returning(MilkProductionORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
