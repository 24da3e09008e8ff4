from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class MilkQuality(str, Enum):
    GOOD = "good"
    MEDIUM = "medium"
    POOR = "poor"


@dataclass(slots=True)
class MilkProduction:
    id: UUID
    account_id: UUID
    animal_id: UUID
    date: date
    morning_amount: Decimal
    evening_amount: Decimal
    total_amount: Decimal
    quality: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        *,
        account_id: UUID,
        animal_id: UUID,
        date: date,
        morning_amount: Decimal = Decimal("0"),
        evening_amount: Decimal = Decimal("0"),
        quality: str | None = None,
        notes: str | None = None,
    ) -> MilkProduction:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            account_id=account_id,
            animal_id=animal_id,
            date=date,
            morning_amount=morning_amount,
            evening_amount=evening_amount,
            total_amount=morning_amount + evening_amount,
            quality=quality,
            notes=notes,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def set_amounts(self, morning_amount: Decimal, evening_amount: Decimal) -> None:
        self.morning_amount = morning_amount
        self.evening_amount = evening_amount
        self.total_amount = morning_amount + evening_amount

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
