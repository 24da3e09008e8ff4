from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.use_cases.settings import account_settings
from farmtrack.domain.services.animals import age_in_months, classify_animal
from farmtrack.domain.services.finance import DateRange, FinancialSummary, financial_summary
from farmtrack.domain.services.gestation import (
    MilkWarning,
    due_reminders,
    month_warnings,
    upcoming_births,
)
from farmtrack.domain.services.milk import MilkSummary, milk_summary
from farmtrack.domain.services.vaccinations import VaccinationSummary, vaccination_summary
from farmtrack.domain.value_objects.animal_status import AnimalStatus

UPCOMING_BIRTH_DAYS = 30


@dataclass(slots=True)
class DashboardSnapshot:
    active_animals: int
    sold_animals: int
    deceased_animals: int
    categories: dict[str, int]
    pregnant_count: int
    upcoming_births: int
    vaccinations: VaccinationSummary
    milk: MilkSummary
    finance_this_month: FinancialSummary
    due_reminders: int
    warnings: list[MilkWarning] = field(default_factory=list)


async def execute(
    uow: UnitOfWork, account_id: UUID, today: date, default_price: Decimal
) -> DashboardSnapshot:
    animals = await uow.animals.list(account_id)
    statuses = Counter(a.status for a in animals)
    active = [a for a in animals if a.is_active]
    categories = Counter(
        classify_animal(a.species, a.gender, age_in_months(a.birth_date, today)).key
        for a in active
    )
    ear_tags = {a.id: a.ear_tag for a in animals}

    pregnant = await uow.inseminations.list(account_id, is_pregnant=True)
    reminders = await uow.pregnancy_reminders.list(account_id, is_sent=False)
    pregnant_ids = {p.id for p in pregnant}
    vaccinations = await uow.vaccinations.list(account_id)

    month = DateRange.month_of(today)
    milk_records = await uow.milk_productions.list(
        account_id, date_from=month.start, date_to=month.end
    )
    settings = await account_settings.get(uow, account_id, default_price)
    transactions = await uow.transactions.list(
        account_id, date_from=month.start, date_to=month.end
    )

    return DashboardSnapshot(
        active_animals=statuses.get(AnimalStatus.ACTIVE.value, 0),
        sold_animals=statuses.get(AnimalStatus.SOLD.value, 0),
        deceased_animals=statuses.get(AnimalStatus.DECEASED.value, 0),
        categories=dict(categories),
        pregnant_count=len(pregnant),
        upcoming_births=len(upcoming_births(pregnant, today, UPCOMING_BIRTH_DAYS)),
        vaccinations=vaccination_summary(vaccinations, today),
        milk=milk_summary(milk_records, today, settings.milk_price_per_liter),
        finance_this_month=financial_summary(transactions, month),
        due_reminders=len(
            due_reminders([r for r in reminders if r.insemination_id in pregnant_ids], today)
        ),
        warnings=month_warnings(pregnant, today, ear_tags),
    )
