from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.vaccination import Vaccination
from farmtrack.domain.services.vaccinations import (
    VaccinationStatus,
    VaccinationSummary,
    sort_vaccinations,
    vaccination_status,
    vaccination_summary,
)


@dataclass(slots=True)
class VaccinationView:
    vaccination: Vaccination
    status: VaccinationStatus
    ear_tag: str | None = None


@dataclass(slots=True)
class ListVaccinationsResult:
    items: list[VaccinationView]
    summary: VaccinationSummary


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    today: date,
    *,
    animal_id: UUID | None = None,
    status: str | None = None,
) -> ListVaccinationsResult:
    records = await uow.vaccinations.list(account_id, animal_id=animal_id)
    animals = await uow.animals.list(account_id)
    ear_tags = {a.id: a.ear_tag for a in animals}
    ordered = sort_vaccinations(records, today)
    items = [
        VaccinationView(
            vaccination=v,
            status=vaccination_status(v.next_date, today),
            ear_tag=ear_tags.get(v.animal_id),
        )
        for v in ordered
    ]
    if status:
        items = [item for item in items if item.status.value == status]
    return ListVaccinationsResult(items=items, summary=vaccination_summary(records, today))
