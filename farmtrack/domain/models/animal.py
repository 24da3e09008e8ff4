from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from farmtrack.domain.value_objects.animal_status import AnimalStatus


@dataclass(slots=True)
class Animal:
    id: UUID
    account_id: UUID
    ear_tag: str
    species: str
    breed: str
    gender: str
    birth_date: date
    mother_ear_tag: str | None = None
    notes: str | None = None
    profile_image_url: str | None = None
    status: str = AnimalStatus.ACTIVE.value

    # Sale fields
    sold_to: str | None = None
    sold_date: date | None = None
    sold_price: Decimal | None = None

    # Death fields
    death_date: date | None = None
    death_reason: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        account_id: UUID,
        ear_tag: str,
        species: str,
        breed: str,
        gender: str,
        birth_date: date,
        mother_ear_tag: str | None = None,
        notes: str | None = None,
        profile_image_url: str | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            account_id=account_id,
            ear_tag=ear_tag,
            species=species,
            breed=breed,
            gender=gender,
            birth_date=birth_date,
            mother_ear_tag=mother_ear_tag,
            notes=notes,
            profile_image_url=profile_image_url,
            status=AnimalStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_active(self) -> bool:
        return self.status == AnimalStatus.ACTIVE.value

    def sell(self, sold_to: str, sold_date: date, sold_price: Decimal) -> None:
        self.status = AnimalStatus.SOLD.value
        self.sold_to = sold_to
        self.sold_date = sold_date
        self.sold_price = sold_price
        self.bump_version()

    def mark_deceased(self, death_date: date, death_reason: str | None = None) -> None:
        self.status = AnimalStatus.DECEASED.value
        self.death_date = death_date
        self.death_reason = death_reason
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
