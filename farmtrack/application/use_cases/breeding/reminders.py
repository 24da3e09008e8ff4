from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.pregnancy_reminder import PregnancyReminder
from farmtrack.domain.services.calendar import days_between
from farmtrack.domain.services.gestation import due_reminders, reminder_label, upcoming_reminders


@dataclass(slots=True)
class ReminderView:
    reminder: PregnancyReminder
    label: str
    days: int
    animal_id: UUID | None
    ear_tag: str | None


@dataclass(slots=True)
class ReminderList:
    due: list[ReminderView]
    upcoming: list[ReminderView]


async def list_reminders(uow: UnitOfWork, account_id: UUID, today: date) -> ReminderList:
    reminders = await uow.pregnancy_reminders.list(account_id, is_sent=False)
    inseminations = {i.id: i for i in await uow.inseminations.list(account_id)}
    ear_tags = {a.id: a.ear_tag for a in await uow.animals.list(account_id)}

    def view(reminder: PregnancyReminder) -> ReminderView:
        insemination = inseminations.get(reminder.insemination_id)
        animal_id = insemination.animal_id if insemination else None
        return ReminderView(
            reminder=reminder,
            label=reminder_label(reminder.reminder_type),
            days=days_between(today, reminder.reminder_date),
            animal_id=animal_id,
            ear_tag=ear_tags.get(animal_id) if animal_id else None,
        )

    # Reminders of finished pregnancies are no longer actionable
    active = [
        r
        for r in reminders
        if (ins := inseminations.get(r.insemination_id)) is not None and ins.is_pregnant
    ]
    return ReminderList(
        due=[view(r) for r in due_reminders(active, today)],
        upcoming=[view(r) for r in upcoming_reminders(active, today)],
    )


async def mark_sent(uow: UnitOfWork, account_id: UUID, reminder_id: UUID) -> PregnancyReminder:
    reminder = await uow.pregnancy_reminders.get(account_id, reminder_id)
    if not reminder:
        raise NotFound("Reminder not found")
    if reminder.is_sent:
        return reminder
    reminder.mark_sent()
    updated = await uow.pregnancy_reminders.update(reminder)
    await uow.commit()
    return updated
