from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class ReminderType(str, Enum):
    SIX_MONTH = "6_month"
    SEVEN_MONTH = "7_month"


# Months after insemination at which each reminder falls due
REMINDER_OFFSETS_MONTHS: dict[ReminderType, int] = {
    ReminderType.SIX_MONTH: 6,
    ReminderType.SEVEN_MONTH: 7,
}


@dataclass(slots=True)
class PregnancyReminder:
    id: UUID
    account_id: UUID
    insemination_id: UUID
    reminder_type: str
    reminder_date: date
    is_sent: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        account_id: UUID,
        insemination_id: UUID,
        reminder_type: str,
        reminder_date: date,
    ) -> PregnancyReminder:
        return cls(
            id=uuid4(),
            account_id=account_id,
            insemination_id=insemination_id,
            reminder_type=reminder_type,
            reminder_date=reminder_date,
            is_sent=False,
            created_at=datetime.now(timezone.utc),
        )

    def mark_sent(self) -> None:
        self.is_sent = True
