from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.repositories.vaccinations import VaccinationRepository
from farmtrack.domain.models.vaccination import Vaccination
from farmtrack.infrastructure.db.orm.vaccination import VaccinationORM


class VaccinationsSQLAlchemyRepository(VaccinationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: VaccinationORM) -> Vaccination:
        return Vaccination(
            id=orm.id,
            account_id=orm.account_id,
            animal_id=orm.animal_id,
            name=orm.name,
            date=orm.date,
            next_date=orm.next_date,
            completed=orm.completed,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, vaccination: Vaccination) -> Vaccination:
        orm = VaccinationORM(
            id=vaccination.id,
            account_id=vaccination.account_id,
            animal_id=vaccination.animal_id,
            name=vaccination.name,
            date=vaccination.date,
            next_date=vaccination.next_date,
            completed=vaccination.completed,
            notes=vaccination.notes,
            created_at=vaccination.created_at,
            updated_at=vaccination.updated_at,
            version=vaccination.version,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, account_id: UUID, vaccination_id: UUID) -> Vaccination | None:
        stmt = (
            select(VaccinationORM)
            .where(VaccinationORM.account_id == account_id)
            .where(VaccinationORM.id == vaccination_id)
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
        next_date_from: date | None = None,
        next_date_to: date | None = None,
    ) -> list[Vaccination]:
        stmt = select(VaccinationORM).where(VaccinationORM.account_id == account_id)
        if animal_id:
            stmt = stmt.where(VaccinationORM.animal_id == animal_id)
        if date_from:
            stmt = stmt.where(VaccinationORM.date >= date_from)
        if date_to:
            stmt = stmt.where(VaccinationORM.date <= date_to)
        if next_date_from:
            stmt = stmt.where(VaccinationORM.next_date >= next_date_from)
        if next_date_to:
            stmt = stmt.where(VaccinationORM.next_date <= next_date_to)
        stmt = stmt.order_by(VaccinationORM.date.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, vaccination: Vaccination) -> Vaccination:
        orm = await self.session.get(VaccinationORM, vaccination.id)
        if not orm or orm.account_id != vaccination.account_id:
            raise NotFound("Vaccination not found")
        orm.name = vaccination.name
        orm.date = vaccination.date
        orm.next_date = vaccination.next_date
        orm.completed = vaccination.completed
        orm.notes = vaccination.notes
        orm.updated_at = vaccination.updated_at
        orm.version = vaccination.version
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, account_id: UUID, vaccination_id: UUID) -> bool:
        stmt = (
            delete(VaccinationORM)
            .where(VaccinationORM.account_id == account_id)
            .where(VaccinationORM.id == vaccination_id)
            .returning(VaccinationORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
