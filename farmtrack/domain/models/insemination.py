from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class InseminationMethod(str, Enum):
    NATURAL = "natural"
    ARTIFICIAL = "artificial"


@dataclass(slots=True)
class Insemination:
    id: UUID
    account_id: UUID
    animal_id: UUID
    date: date
    method: str
    expected_birth_date: date
    actual_birth_date: date | None = None
    is_pregnant: bool = True
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        account_id: UUID,
        animal_id: UUID,
        date: date,
        method: str,
        expected_birth_date: date,
        notes: str | None = None,
    ) -> Insemination:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            account_id=account_id,
            animal_id=animal_id,
            date=date,
            method=method,
            expected_birth_date=expected_birth_date,
            actual_birth_date=None,
            is_pregnant=True,
            notes=notes,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def complete_birth(self, actual_birth_date: date) -> None:
        self.is_pregnant = False
        self.actual_birth_date = actual_birth_date
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
