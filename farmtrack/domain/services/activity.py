from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Sequence

from farmtrack.domain.models.animal import Animal
from farmtrack.domain.models.insemination import Insemination
from farmtrack.domain.models.vaccination import Vaccination
from farmtrack.domain.services.calendar import last_n_month_starts
from farmtrack.domain.services.finance import DateRange
from farmtrack.domain.services.vaccinations import completion_rate
from farmtrack.utils.datetime_tz import format_month


@dataclass(frozen=True, slots=True)
class MonthlyActivity:
    month: date
    label: str
    animals_added: int
    vaccinations: int
    births_expected: int


@dataclass(frozen=True, slots=True)
class ActivityReport:
    months: list[MonthlyActivity]
    species_distribution: dict[str, int]
    gender_distribution: dict[str, int]
    pregnant_count: int
    vaccination_completion_rate: int
    total_animals: int


def monthly_activity(
    animals: Sequence[Animal],
    vaccinations: Sequence[Vaccination],
    inseminations: Sequence[Insemination],
    today: date,
    months: int = 6,
) -> list[MonthlyActivity]:
    series: list[MonthlyActivity] = []
    for start in last_n_month_starts(today, months):
        window = DateRange.month_of(start)
        series.append(
            MonthlyActivity(
                month=start,
                label=format_month(start),
                animals_added=sum(1 for a in animals if window.contains(a.created_at.date())),
                vaccinations=sum(1 for v in vaccinations if window.contains(v.date)),
                births_expected=sum(
                    1
                    for i in inseminations
                    if i.is_pregnant and window.contains(i.expected_birth_date)
                ),
            )
        )
    return series


def activity_report(
    animals: Sequence[Animal],
    vaccinations: Sequence[Vaccination],
    inseminations: Sequence[Insemination],
    today: date,
    months: int = 6,
) -> ActivityReport:
    return ActivityReport(
        months=monthly_activity(animals, vaccinations, inseminations, today, months),
        species_distribution=dict(Counter(a.species for a in animals)),
        gender_distribution=dict(Counter(a.gender for a in animals)),
        pregnant_count=sum(1 for i in inseminations if i.is_pregnant),
        vaccination_completion_rate=completion_rate(vaccinations),
        total_animals=len(animals),
    )
