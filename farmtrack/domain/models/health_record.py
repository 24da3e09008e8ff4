from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class HealthRecordType(str, Enum):
    VET_VISIT = "vet_visit"
    TREATMENT = "treatment"
    ILLNESS = "illness"
    INJURY = "injury"
    SURGERY = "surgery"
    DEWORMING = "deworming"
    PREGNANCY_CHECK = "pregnancy_check"
    HOOF_CARE = "hoof_care"
    OTHER = "other"


@dataclass(slots=True)
class HealthRecord:
    id: UUID
    account_id: UUID
    animal_id: UUID
    record_type: str
    title: str
    date: date
    description: str | None = None
    vet_name: str | None = None
    cost: Decimal | None = None
    medications: list[str] | None = None
    follow_up_date: date | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        account_id: UUID,
        animal_id: UUID,
        record_type: HealthRecordType,
        title: str,
        date: date,
        description: str | None = None,
        vet_name: str | None = None,
        cost: Decimal | None = None,
        medications: list[str] | None = None,
        follow_up_date: date | None = None,
    ) -> HealthRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            account_id=account_id,
            animal_id=animal_id,
            record_type=record_type.value,
            title=title,
            date=date,
            description=description,
            vet_name=vet_name,
            cost=cost,
            medications=medications,
            follow_up_date=follow_up_date,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
