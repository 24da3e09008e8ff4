from __future__ import annotations

from datetime import date
from uuid import uuid4

from farmtrack.domain.models.vaccination import Vaccination
from farmtrack.domain.services.vaccinations import (
    VaccinationStatus,
    completion_rate,
    sort_vaccinations,
    vaccination_status,
    vaccination_summary,
)

TODAY = date(2024, 7, 15)


def _vaccination(next_date: date | None, given: date = date(2024, 1, 1), completed=False):
    return Vaccination.create(
        account_id=uuid4(),
        animal_id=uuid4(),
        name="brucella",
        date=given,
        next_date=next_date,
        completed=completed,
    )


def test_status_boundaries():
    assert vaccination_status(None, TODAY) is VaccinationStatus.COMPLETED
    assert vaccination_status(date(2024, 7, 14), TODAY) is VaccinationStatus.OVERDUE
    assert vaccination_status(TODAY, TODAY) is VaccinationStatus.UPCOMING
    assert vaccination_status(date(2024, 7, 22), TODAY) is VaccinationStatus.UPCOMING
    assert vaccination_status(date(2024, 7, 23), TODAY) is VaccinationStatus.SCHEDULED


def test_sort_puts_overdue_first_then_by_next_date():
    scheduled = _vaccination(date(2024, 9, 1))
    done = _vaccination(None)
    overdue = _vaccination(date(2024, 7, 1))
    upcoming = _vaccination(date(2024, 7, 18))
    upcoming_later = _vaccination(date(2024, 7, 20))
    ordered = sort_vaccinations([scheduled, done, upcoming_later, overdue, upcoming], TODAY)
    assert ordered == [overdue, upcoming, upcoming_later, scheduled, done]


def test_summary_and_completion_rate():
    items = [
        _vaccination(date(2024, 7, 1)),
        _vaccination(date(2024, 7, 18)),
        _vaccination(None, completed=True),
    ]
    summary = vaccination_summary(items, TODAY)
    assert (summary.overdue, summary.upcoming, summary.scheduled, summary.completed) == (1, 1, 0, 1)
    assert summary.total == 3
    assert completion_rate(items) == 33
    assert completion_rate([]) == 0
