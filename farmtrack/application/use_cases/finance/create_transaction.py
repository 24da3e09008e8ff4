from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.transaction import Transaction, TransactionType, is_valid_category


@dataclass(slots=True)
class CreateTransactionInput:
    type: str
    category: str
    amount: Decimal
    date: date
    animal_id: UUID | None = None
    description: str | None = None


async def execute(
    uow: UnitOfWork, account_id: UUID, payload: CreateTransactionInput
) -> Transaction:
    if payload.type not in {t.value for t in TransactionType}:
        raise ValidationError("Unknown transaction type", details={"type": payload.type})
    if not is_valid_category(payload.type, payload.category):
        raise ValidationError(
            "Category does not match transaction type",
            details={"type": payload.type, "category": payload.category},
        )
    if payload.amount <= 0:
        raise ValidationError("Amount must be positive")
    if payload.animal_id is not None:
        animal = await uow.animals.get(account_id, payload.animal_id)
        if not animal:
            raise NotFound("Animal not found")
    transaction = Transaction.create(
        account_id=account_id,
        type=payload.type,
        category=payload.category,
        amount=payload.amount,
        date=payload.date,
        animal_id=payload.animal_id,
        description=payload.description,
    )
    created = await uow.transactions.add(transaction)
    await uow.commit()
    return created
