from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.errors import ConflictError, InfrastructureError
from farmtrack.application.interfaces.repositories.animals import AnimalRepository
from farmtrack.domain.models.animal import Animal
from farmtrack.infrastructure.db.orm.animal import AnimalORM

DUPLICATE_EAR_TAG = "An animal with this ear tag already exists"


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            account_id=orm.account_id,
            ear_tag=orm.ear_tag,
            species=orm.species,
            breed=orm.breed,
            gender=orm.gender,
            birth_date=orm.birth_date,
            mother_ear_tag=orm.mother_ear_tag,
            notes=orm.notes,
            profile_image_url=orm.profile_image_url,
            status=orm.status,
            sold_to=orm.sold_to,
            sold_date=orm.sold_date,
            sold_price=orm.sold_price,
            death_date=orm.death_date,
            death_reason=orm.death_reason,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            account_id=animal.account_id,
            ear_tag=animal.ear_tag,
            species=animal.species,
            breed=animal.breed,
            gender=animal.gender,
            birth_date=animal.birth_date,
            mother_ear_tag=animal.mother_ear_tag,
            notes=animal.notes,
            profile_image_url=animal.profile_image_url,
            status=animal.status,
            created_at=animal.created_at,
            updated_at=animal.updated_at,
            version=animal.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(DUPLICATE_EAR_TAG, details={"ear_tag": animal.ear_tag}) from exc
        return self._to_domain(orm)

    async def get(self, account_id: UUID, animal_id: UUID) -> Animal | None:
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.account_id == account_id)
            .where(AnimalORM.id == animal_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_many(self, account_id: UUID, animal_ids: list[UUID]) -> list[Animal]:
        if not animal_ids:
            return []
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.account_id == account_id)
            .where(AnimalORM.id.in_(animal_ids))
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    def _apply_filters(self, stmt, account_id, status, species=None, gender=None, search=None):
        stmt = stmt.where(AnimalORM.account_id == account_id)
        if status:
            stmt = stmt.where(AnimalORM.status == status)
        if species:
            stmt = stmt.where(AnimalORM.species == species)
        if gender:
            stmt = stmt.where(AnimalORM.gender == gender)
        if search:
            pattern = f"%{search.strip()}%"
            stmt = stmt.where(
                or_(AnimalORM.ear_tag.ilike(pattern), AnimalORM.breed.ilike(pattern))
            )
        return stmt

    async def list(
        self,
        account_id: UUID,
        *,
        status: str | None = None,
        species: str | None = None,
        gender: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Animal]:
        stmt = self._apply_filters(select(AnimalORM), account_id, status, species, gender, search)
        stmt = stmt.order_by(AnimalORM.created_at.desc(), AnimalORM.ear_tag).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count(self, account_id: UUID, *, status: str | None = None) -> int:
        stmt = self._apply_filters(select(func.count(AnimalORM.id)), account_id, status)
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def update(
        self,
        account_id: UUID,
        animal_id: UUID,
        data: dict,
        expected_version: int | None = None,
    ) -> Animal | None:
        stmt = update(AnimalORM).where(
            AnimalORM.account_id == account_id, AnimalORM.id == animal_id
        )
        if expected_version is not None:
            stmt = stmt.where(AnimalORM.version == expected_version)
        stmt = stmt.values(**data, version=AnimalORM.version + 1).returning(AnimalORM)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError(DUPLICATE_EAR_TAG) from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def save(self, animal: Animal) -> Animal:
        orm = await self.session.get(AnimalORM, animal.id)
        if not orm or orm.account_id != animal.account_id:
            raise InfrastructureError(f"Animal {animal.id} not found")
        orm.status = animal.status
        orm.sold_to = animal.sold_to
        orm.sold_date = animal.sold_date
        orm.sold_price = animal.sold_price
        orm.death_date = animal.death_date
        orm.death_reason = animal.death_reason
        orm.updated_at = animal.updated_at
        orm.version = animal.version
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, account_id: UUID, animal_id: UUID) -> bool:
        stmt = (
            delete(AnimalORM)
            .where(AnimalORM.account_id == account_id)
            .where(AnimalORM.id == animal_id)
            .returning(AnimalORM.id)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete animal") from exc
        return result.scalar_one_or_none() is not None
