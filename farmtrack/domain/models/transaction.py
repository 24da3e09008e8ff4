from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


INCOME_CATEGORIES: dict[str, str] = {
    "sut": "Milk sale",
    "hayvan-satis": "Animal sale",
    "et": "Meat sale",
    "gubre": "Manure sale",
    "deri": "Hide sale",
    "destek": "Subsidy / support",
    "diger-gelir": "Other income",
}

EXPENSE_CATEGORIES: dict[str, str] = {
    "yem": "Feed",
    "veteriner": "Veterinarian",
    "ilac": "Medicine",
    "ekipman": "Equipment",
    "iscilik": "Labour",
    "elektrik": "Electricity",
    "yakit": "Fuel",
    "bakim": "Maintenance",
    "diger-gider": "Other expense",
}

MILK_SALE_CATEGORY = "sut"
ANIMAL_SALE_CATEGORY = "hayvan-satis"


def categories_for(type_: str) -> dict[str, str]:
    if type_ == TransactionType.INCOME.value:
        return INCOME_CATEGORIES
    if type_ == TransactionType.EXPENSE.value:
        return EXPENSE_CATEGORIES
    return {}


def is_valid_category(type_: str, category: str) -> bool:
    return category in categories_for(type_)


@dataclass(slots=True)
class Transaction:
    id: UUID
    account_id: UUID
    type: str
    category: str
    amount: Decimal
    date: date
    animal_id: UUID | None = None
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        account_id: UUID,
        type: str,
        category: str,
        amount: Decimal,
        date: date,
        animal_id: UUID | None = None,
        description: str | None = None,
    ) -> Transaction:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            account_id=account_id,
            type=type,
            category=category,
            amount=amount,
            date=date,
            animal_id=animal_id,
            description=description,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME.value
