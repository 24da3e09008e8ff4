from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.repositories.inseminations import InseminationRepository
from farmtrack.domain.models.insemination import Insemination
from farmtrack.infrastructure.db.orm.insemination import InseminationORM


class InseminationsSQLAlchemyRepository(InseminationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: InseminationORM) -> Insemination:
        return Insemination(
            id=orm.id,
            account_id=orm.account_id,
            animal_id=orm.animal_id,
            date=orm.date,
            method=orm.method,
            expected_birth_date=orm.expected_birth_date,
            actual_birth_date=orm.actual_birth_date,
            is_pregnant=orm.is_pregnant,
            notes=orm.notes,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, insemination: Insemination) -> Insemination:
        orm = InseminationORM(
            id=insemination.id,
            account_id=insemination.account_id,
            animal_id=insemination.animal_id,
            date=insemination.date,
            method=insemination.method,
            expected_birth_date=insemination.expected_birth_date,
            actual_birth_date=insemination.actual_birth_date,
            is_pregnant=insemination.is_pregnant,
            notes=insemination.notes,
            created_at=insemination.created_at,
            updated_at=insemination.updated_at,
            version=insemination.version,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def update(self, insemination: Insemination) -> Insemination:
        orm = await self.session.get(InseminationORM, insemination.id)
        if not orm or orm.account_id != insemination.account_id:
            raise NotFound("Insemination not found")
        orm.date = insemination.date
        orm.method = insemination.method
        orm.expected_birth_date = insemination.expected_birth_date
        orm.actual_birth_date = insemination.actual_birth_date
        orm.is_pregnant = insemination.is_pregnant
        orm.notes = insemination.notes
        orm.updated_at = insemination.updated_at
        orm.version = insemination.version
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, account_id: UUID, insemination_id: UUID) -> Insemination | None:
        stmt = (
            select(InseminationORM)
            .where(InseminationORM.account_id == account_id)
            .where(InseminationORM.id == insemination_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        account_id: UUID,
        *,
        animal_id: UUID | None = None,
        is_pregnant: bool | None = None,
    ) -> list[Insemination]:
        stmt = select(InseminationORM).where(InseminationORM.account_id == account_id)
        if animal_id:
            stmt = stmt.where(InseminationORM.animal_id == animal_id)
        if is_pregnant is not None:
            stmt = stmt.where(InseminationORM.is_pregnant.is_(is_pregnant))
        stmt = stmt.order_by(InseminationORM.date.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def delete(self, account_id: UUID, insemination_id: UUID) -> bool:
        stmt = (
            delete(InseminationORM)
            .where(InseminationORM.account_id == account_id)
            .where(InseminationORM.id == insemination_id)
            .returning(InseminationORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
