from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Sequence

from farmtrack.domain.models.vaccination import Vaccination
from farmtrack.domain.services.calendar import days_between

UPCOMING_WINDOW_DAYS = 7


class VaccinationStatus(str, Enum):
    OVERDUE = "overdue"
    UPCOMING = "upcoming"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"


STATUS_PRIORITY: dict[VaccinationStatus, int] = {
    VaccinationStatus.OVERDUE: 0,
    VaccinationStatus.UPCOMING: 1,
    VaccinationStatus.SCHEDULED: 2,
    VaccinationStatus.COMPLETED: 3,
}


def vaccination_status(next_date: date | None, today: date) -> VaccinationStatus:
    if next_date is None:
        return VaccinationStatus.COMPLETED
    days = days_between(today, next_date)
    if days < 0:
        return VaccinationStatus.OVERDUE
    if days <= UPCOMING_WINDOW_DAYS:
        return VaccinationStatus.UPCOMING
    return VaccinationStatus.SCHEDULED


def sort_vaccinations(items: Iterable[Vaccination], today: date) -> list[Vaccination]:
    """Order by status priority, then next due date ascending, then given date descending."""

    def key(v: Vaccination):
        status = vaccination_status(v.next_date, today)
        next_ord = v.next_date.toordinal() if v.next_date else 0
        return (STATUS_PRIORITY[status], next_ord, -v.date.toordinal())

    return sorted(items, key=key)


@dataclass(frozen=True, slots=True)
class VaccinationSummary:
    overdue: int
    upcoming: int
    scheduled: int
    completed: int
    total: int


def vaccination_summary(items: Iterable[Vaccination], today: date) -> VaccinationSummary:
    counts = {status: 0 for status in VaccinationStatus}
    total = 0
    for item in items:
        counts[vaccination_status(item.next_date, today)] += 1
        total += 1
    return VaccinationSummary(
        overdue=counts[VaccinationStatus.OVERDUE],
        upcoming=counts[VaccinationStatus.UPCOMING],
        scheduled=counts[VaccinationStatus.SCHEDULED],
        completed=counts[VaccinationStatus.COMPLETED],
        total=total,
    )


def completion_rate(items: Sequence[Vaccination]) -> int:
    """Percentage of records flagged completed, rounded to an integer."""
    if not items:
        return 0
    done = sum(1 for v in items if v.completed)
    return round(done / len(items) * 100)


def overdue_vaccinations(items: Iterable[Vaccination], today: date) -> list[Vaccination]:
    return sorted(
        (v for v in items if v.next_date is not None and v.next_date < today),
        key=lambda v: v.next_date,
    )


def due_soon_vaccinations(
    items: Iterable[Vaccination], today: date, within_days: int = UPCOMING_WINDOW_DAYS
) -> list[Vaccination]:
    return sorted(
        (
            v
            for v in items
            if v.next_date is not None and 0 <= days_between(today, v.next_date) <= within_days
        ),
        key=lambda v: v.next_date,
    )
