from __future__ import annotations

from datetime import date
from uuid import UUID

from farmtrack.application.errors import ConflictError, NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.insemination import Insemination


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    insemination_id: UUID,
    today: date,
    actual_birth_date: date | None = None,
) -> Insemination:
    """Close a pregnancy. Completing the same insemination twice raises ``ConflictError``."""
    insemination = await uow.inseminations.get(account_id, insemination_id)
    if not insemination:
        raise NotFound("Insemination not found")
    if not insemination.is_pregnant:
        raise ConflictError(
            "Birth already recorded for this insemination",
            details={"actual_birth_date": str(insemination.actual_birth_date)},
        )
    birth_date = actual_birth_date or today
    if birth_date < insemination.date:
        raise ValidationError("Birth date cannot be before the insemination date")
    insemination.complete_birth(birth_date)
    updated = await uow.inseminations.update(insemination)
    await uow.commit()
    return updated
