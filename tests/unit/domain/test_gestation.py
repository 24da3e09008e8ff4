from __future__ import annotations

from datetime import date
from uuid import uuid4

from farmtrack.domain.models.insemination import Insemination
from farmtrack.domain.services.gestation import (
    REDUCE_MILK,
    STOP_MILK,
    build_reminders,
    due_reminders,
    expected_birth_date,
    month_warnings,
    pregnancy_progress,
    upcoming_births,
)


def _insemination(on: date, species: str = "cattle") -> Insemination:
    return Insemination.create(
        account_id=uuid4(),
        animal_id=uuid4(),
        date=on,
        method="artificial",
        expected_birth_date=expected_birth_date(on, species),
    )


def test_expected_birth_date_uses_species_gestation():
    assert expected_birth_date(date(2024, 1, 1), "cattle") == date(2024, 10, 10)
    assert expected_birth_date(date(2024, 1, 1), "sheep") == date(2024, 5, 30)
    # Unknown species fall back to the generic length
    assert expected_birth_date(date(2024, 1, 1), "llama") == expected_birth_date(
        date(2024, 1, 1), "other"
    )


def test_create_sets_expected_birth_date():
    item = _insemination(date(2024, 1, 1))
    assert item.expected_birth_date == date(2024, 10, 10)
    assert item.is_pregnant


def test_progress_is_clamped_and_flags_overdue():
    progress = pregnancy_progress(date(2024, 1, 1), "cattle", date(2024, 10, 20))
    assert progress.progress_percent == 100.0
    assert progress.days_remaining == -10
    assert progress.is_overdue

    early = pregnancy_progress(date(2024, 1, 1), "cattle", date(2024, 1, 1))
    assert early.progress_percent == 0.0
    assert early.pregnancy_month == 0


def test_month_six_warns_to_reduce_milk():
    item = _insemination(date(2024, 1, 1))
    warnings = month_warnings([item], date(2024, 7, 2), {item.animal_id: "TR-1"})
    assert [w.kind for w in warnings] == [REDUCE_MILK]
    assert warnings[0].ear_tag == "TR-1"


def test_month_seven_warns_to_stop_milk_only():
    item = _insemination(date(2024, 1, 1))
    warnings = month_warnings([item], date(2024, 8, 2))
    assert [w.kind for w in warnings] == [STOP_MILK]


def test_completed_pregnancies_do_not_warn():
    item = _insemination(date(2024, 1, 1))
    item.complete_birth(date(2024, 8, 1))
    assert month_warnings([item], date(2024, 8, 2)) == []


def test_reminders_fall_six_and_seven_months_after_insemination():
    item = _insemination(date(2024, 1, 31))
    reminders = build_reminders(item)
    assert [(r.reminder_type, r.reminder_date) for r in reminders] == [
        ("6_month", date(2024, 7, 31)),
        ("7_month", date(2024, 8, 31)),
    ]
    assert all(r.insemination_id == item.id and not r.is_sent for r in reminders)


def test_due_reminders_skip_sent_and_future():
    item = _insemination(date(2024, 1, 1))
    six, seven = build_reminders(item)
    assert due_reminders([six, seven], date(2024, 7, 15)) == [six]
    six.mark_sent()
    assert due_reminders([six, seven], date(2024, 8, 15)) == [seven]


def test_upcoming_births_window():
    soon = _insemination(date(2023, 10, 10))  # due 2024-07-19
    later = _insemination(date(2024, 1, 1))
    assert upcoming_births([later, soon], date(2024, 7, 15), 14) == [soon]
