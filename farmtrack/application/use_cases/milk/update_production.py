from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.use_cases.milk.record_production import (
    validate_amounts,
    validate_quality,
)
from farmtrack.domain.models.milk_production import MilkProduction


@dataclass(slots=True)
class UpdateProductionInput:
    morning_amount: Decimal | None = None
    evening_amount: Decimal | None = None
    quality: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, account_id: UUID, production_id: UUID, payload: UpdateProductionInput
) -> MilkProduction:
    production = await uow.milk_productions.get(account_id, production_id)
    if not production:
        raise NotFound("Milk production not found")
    morning = (
        payload.morning_amount
        if payload.morning_amount is not None
        else production.morning_amount
    )
    evening = (
        payload.evening_amount
        if payload.evening_amount is not None
        else production.evening_amount
    )
    validate_amounts(morning, evening)
    validate_quality(payload.quality)
    production.set_amounts(morning, evening)
    if payload.quality is not None:
        production.quality = payload.quality
    if payload.notes is not None:
        production.notes = payload.notes
    production.bump_version()
    updated = await uow.milk_productions.update(production)
    await uow.commit()
    return updated
