from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Mapping
from uuid import UUID

from farmtrack.domain.models.insemination import Insemination
from farmtrack.domain.models.pregnancy_reminder import (
    REMINDER_OFFSETS_MONTHS,
    PregnancyReminder,
    ReminderType,
)
from farmtrack.domain.services.calendar import add_months, days_between, whole_months_between
from farmtrack.domain.value_objects.species import gestation_days

REDUCE_MILK = "reduce_milk"
STOP_MILK = "stop_milk"

REDUCE_MILK_MONTH = 6
STOP_MILK_MONTH = 7
REMINDER_LOOKAHEAD_DAYS = 7


@dataclass(frozen=True, slots=True)
class PregnancyProgress:
    expected_birth_date: date
    days_elapsed: int
    days_remaining: int
    progress_percent: float
    pregnancy_month: int
    is_overdue: bool


@dataclass(frozen=True, slots=True)
class MilkWarning:
    insemination_id: UUID
    animal_id: UUID
    ear_tag: str | None
    kind: str
    pregnancy_month: int
    message: str


def expected_birth_date(insemination_date: date, species: str) -> date:
    return insemination_date + timedelta(days=gestation_days(species))


def pregnancy_progress(insemination_date: date, species: str, today: date) -> PregnancyProgress:
    length = gestation_days(species)
    due = insemination_date + timedelta(days=length)
    elapsed = days_between(insemination_date, today)
    remaining = days_between(today, due)
    percent = min(100.0, max(0.0, elapsed / length * 100))
    return PregnancyProgress(
        expected_birth_date=due,
        days_elapsed=elapsed,
        days_remaining=remaining,
        progress_percent=round(percent, 1),
        pregnancy_month=whole_months_between(insemination_date, today),
        is_overdue=remaining < 0,
    )


def milk_advisory(pregnancy_month: int) -> str | None:
    """Return the milk-withdrawal advisory kind for a month of pregnancy, if any."""
    if pregnancy_month >= STOP_MILK_MONTH:
        return STOP_MILK
    if pregnancy_month >= REDUCE_MILK_MONTH:
        return REDUCE_MILK
    return None


def _warning_text(kind: str, ear_tag: str | None) -> str:
    who = ear_tag or "Animal"
    if kind == STOP_MILK:
        return f"{who}: stop milk intake completely (7th month of pregnancy)"
    return f"{who}: reduce milk intake (6th month of pregnancy)"


def month_warnings(
    inseminations: Iterable[Insemination],
    today: date,
    ear_tags: Mapping[UUID, str] | None = None,
) -> list[MilkWarning]:
    ear_tags = ear_tags or {}
    warnings: list[MilkWarning] = []
    for item in inseminations:
        if not item.is_pregnant:
            continue
        month = whole_months_between(item.date, today)
        kind = milk_advisory(month)
        if kind is None:
            continue
        tag = ear_tags.get(item.animal_id)
        warnings.append(
            MilkWarning(
                insemination_id=item.id,
                animal_id=item.animal_id,
                ear_tag=tag,
                kind=kind,
                pregnancy_month=month,
                message=_warning_text(kind, tag),
            )
        )
    return warnings


def build_reminders(insemination: Insemination) -> list[PregnancyReminder]:
    return [
        PregnancyReminder.create(
            account_id=insemination.account_id,
            insemination_id=insemination.id,
            reminder_type=reminder_type.value,
            reminder_date=add_months(insemination.date, months),
        )
        for reminder_type, months in REMINDER_OFFSETS_MONTHS.items()
    ]


def due_reminders(reminders: Iterable[PregnancyReminder], today: date) -> list[PregnancyReminder]:
    return sorted(
        (r for r in reminders if not r.is_sent and r.reminder_date <= today),
        key=lambda r: r.reminder_date,
    )


def upcoming_reminders(
    reminders: Iterable[PregnancyReminder],
    today: date,
    within_days: int = REMINDER_LOOKAHEAD_DAYS,
) -> list[PregnancyReminder]:
    return sorted(
        (
            r
            for r in reminders
            if not r.is_sent and 0 < days_between(today, r.reminder_date) <= within_days
        ),
        key=lambda r: r.reminder_date,
    )


def upcoming_births(
    inseminations: Iterable[Insemination], today: date, within_days: int
) -> list[Insemination]:
    return sorted(
        (
            i
            for i in inseminations
            if i.is_pregnant and 0 <= days_between(today, i.expected_birth_date) <= within_days
        ),
        key=lambda i: i.expected_birth_date,
    )


def reminder_label(reminder_type: str) -> str:
    if reminder_type == ReminderType.SEVEN_MONTH.value:
        return "Stop milk intake completely (7th month reminder)"
    return "Reduce milk intake (6th month reminder)"
