from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.errors import ValidationError
from farmtrack.application.interfaces.repositories.transactions import TransactionRepository
from farmtrack.domain.models.transaction import Transaction
from farmtrack.infrastructure.db.orm.transaction import TransactionORM


class TransactionsSQLAlchemyRepository(TransactionRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: TransactionORM) -> Transaction:
        return Transaction(
            id=orm.id,
            account_id=orm.account_id,
            type=orm.type,
            category=orm.category,
            amount=orm.amount,
            date=orm.date,
            animal_id=orm.animal_id,
            description=orm.description,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, transaction: Transaction) -> Transaction:
        orm = TransactionORM(
            id=transaction.id,
            account_id=transaction.account_id,
            type=transaction.type,
            category=transaction.category,
            amount=transaction.amount,
            date=transaction.date,
            animal_id=transaction.animal_id,
            description=transaction.description,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
            version=transaction.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ValidationError("Invalid transaction reference") from exc
        return self._to_domain(orm)

    async def get(self, account_id: UUID, transaction_id: UUID) -> Transaction | None:
        stmt = (
            select(TransactionORM)
            .where(TransactionORM.account_id == account_id)
            .where(TransactionORM.id == transaction_id)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        account_id: UUID,
        *,
        type: str | None = None,
        category: str | None = None,
        animal_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Transaction]:
        stmt = select(TransactionORM).where(TransactionORM.account_id == account_id)
        if type:
            stmt = stmt.where(TransactionORM.type == type)
        if category:
            stmt = stmt.where(TransactionORM.category == category)
        if animal_id:
            stmt = stmt.where(TransactionORM.animal_id == animal_id)
        if date_from:
            stmt = stmt.where(TransactionORM.date >= date_from)
        if date_to:
            stmt = stmt.where(TransactionORM.date <= date_to)
        stmt = stmt.order_by(TransactionORM.date.desc(), TransactionORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def delete(self, account_id: UUID, transaction_id: UUID) -> bool:
        stmt = (
            delete(TransactionORM)
            .where(TransactionORM.account_id == account_id)
            .where(TransactionORM.id == transaction_id)
            .returning(TransactionORM.id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
