from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.milk_production import MilkProduction, MilkQuality


@dataclass(slots=True)
class RecordProductionInput:
    animal_id: UUID
    date: date
    morning_amount: Decimal = Decimal("0")
    evening_amount: Decimal = Decimal("0")
    quality: str | None = None
    notes: str | None = None


def validate_amounts(morning: Decimal, evening: Decimal) -> None:
    if morning < 0 or evening < 0:
        raise ValidationError("Milk amounts cannot be negative")
    if morning + evening <= 0:
        raise ValidationError("Enter a morning or evening amount")


def validate_quality(quality: str | None) -> None:
    if quality is not None and quality not in {q.value for q in MilkQuality}:
        raise ValidationError("Unknown milk quality", details={"quality": quality})


async def execute(
    uow: UnitOfWork, account_id: UUID, payload: RecordProductionInput
) -> MilkProduction:
    """Insert the day's record; a second record for the same animal and day is a conflict."""
    validate_amounts(payload.morning_amount, payload.evening_amount)
    validate_quality(payload.quality)
    animal = await uow.animals.get(account_id, payload.animal_id)
    if not animal:
        raise NotFound("Animal not found")
    production = MilkProduction.create(
        account_id=account_id,
        animal_id=payload.animal_id,
        date=payload.date,
        morning_amount=payload.morning_amount,
        evening_amount=payload.evening_amount,
        quality=payload.quality,
        notes=payload.notes,
    )
    created = await uow.milk_productions.add(production)
    await uow.commit()
    return created
