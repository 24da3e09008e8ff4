from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from farmtrack.application.errors import ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.use_cases.settings import account_settings
from farmtrack.domain.models.transaction import MILK_SALE_CATEGORY, Transaction, TransactionType
from farmtrack.domain.services.milk import milk_sale_amount, milk_sale_description


@dataclass(slots=True)
class RecordMilkSaleInput:
    liters: Decimal
    date: date
    price_per_liter: Decimal | None = None
    description: str | None = None


async def execute(
    uow: UnitOfWork, account_id: UUID, payload: RecordMilkSaleInput, default_price: Decimal
) -> Transaction:
    """Book a milk sale as a `sut` income transaction at the account's price per liter."""
    if payload.liters <= 0:
        raise ValidationError("Liters must be positive")
    price = payload.price_per_liter
    if price is None:
        price = (await account_settings.get(uow, account_id, default_price)).milk_price_per_liter
    if price <= 0:
        raise ValidationError("Price per liter must be positive")
    transaction = Transaction.create(
        account_id=account_id,
        type=TransactionType.INCOME.value,
        category=MILK_SALE_CATEGORY,
        amount=milk_sale_amount(payload.liters, price),
        date=payload.date,
        description=payload.description or milk_sale_description(payload.liters, price),
    )
    created = await uow.transactions.add(transaction)
    await uow.commit()
    return created
