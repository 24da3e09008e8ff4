from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping
from uuid import UUID

from farmtrack.domain.models.insemination import Insemination
from farmtrack.domain.models.vaccination import Vaccination
from farmtrack.domain.services.calendar import days_between

HIGH = "high"
MEDIUM = "medium"
_PRIORITY_ORDER = {HIGH: 0, MEDIUM: 1}

BIRTH_WINDOW = (-7, 30)
VACCINATION_WINDOW = (-30, 14)


@dataclass(frozen=True, slots=True)
class Alert:
    kind: str
    reference_id: UUID
    animal_id: UUID
    ear_tag: str | None
    title: str
    message: str
    due_date: date
    days: int
    priority: str
    is_read: bool


def _birth_message(days: int) -> str:
    if days < 0:
        return f"Birth is {abs(days)} days overdue"
    if days == 0:
        return "Birth expected today"
    return f"{days} days until birth"


def _vaccination_message(name: str, days: int) -> str:
    if days < 0:
        return f"{name} is {abs(days)} days late"
    if days == 0:
        return f"{name} is due today"
    return f"{name} due in {days} days"


def alert_feed(
    inseminations: Iterable[Insemination],
    vaccinations: Iterable[Vaccination],
    today: date,
    ear_tags: Mapping[UUID, str] | None = None,
) -> list[Alert]:
    ear_tags = ear_tags or {}
    alerts: list[Alert] = []

    for item in inseminations:
        if not item.is_pregnant:
            continue
        days = days_between(today, item.expected_birth_date)
        if not BIRTH_WINDOW[0] <= days <= BIRTH_WINDOW[1]:
            continue
        alerts.append(
            Alert(
                kind="birth",
                reference_id=item.id,
                animal_id=item.animal_id,
                ear_tag=ear_tags.get(item.animal_id),
                title="Upcoming birth",
                message=_birth_message(days),
                due_date=item.expected_birth_date,
                days=days,
                priority=HIGH if days <= 7 else MEDIUM,
                is_read=days > 14,
            )
        )

    for vac in vaccinations:
        if vac.next_date is None:
            continue
        days = days_between(today, vac.next_date)
        if not VACCINATION_WINDOW[0] <= days <= VACCINATION_WINDOW[1]:
            continue
        alerts.append(
            Alert(
                kind="vaccination",
                reference_id=vac.id,
                animal_id=vac.animal_id,
                ear_tag=ear_tags.get(vac.animal_id),
                title="Overdue vaccination" if days < 0 else "Vaccination due",
                message=_vaccination_message(vac.name, days),
                due_date=vac.next_date,
                days=days,
                priority=HIGH if days <= 3 else MEDIUM,
                is_read=days > 7,
            )
        )

    alerts.sort(key=lambda a: (_PRIORITY_ORDER[a.priority], a.due_date))
    return alerts
