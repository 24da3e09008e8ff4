from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.health_record import HealthRecord, HealthRecordType


@dataclass(slots=True)
class CreateHealthRecordInput:
    animal_id: UUID
    record_type: str
    title: str
    date: date
    description: str | None = None
    vet_name: str | None = None
    cost: Decimal | None = None
    medications: list[str] | None = None
    follow_up_date: date | None = None


def parse_record_type(value: str) -> HealthRecordType:
    try:
        return HealthRecordType(value)
    except ValueError as exc:
        raise ValidationError("Unknown health record type", details={"record_type": value}) from exc


async def execute(
    uow: UnitOfWork, account_id: UUID, payload: CreateHealthRecordInput
) -> HealthRecord:
    record_type = parse_record_type(payload.record_type)
    if not payload.title.strip():
        raise ValidationError("Title is required")
    if payload.cost is not None and payload.cost < 0:
        raise ValidationError("Cost cannot be negative")
    if payload.follow_up_date and payload.follow_up_date < payload.date:
        raise ValidationError("Follow-up date cannot be before the record date")
    animal = await uow.animals.get(account_id, payload.animal_id)
    if not animal:
        raise NotFound("Animal not found")
    record = HealthRecord.create(
        account_id=account_id,
        animal_id=payload.animal_id,
        record_type=record_type,
        title=payload.title.strip(),
        date=payload.date,
        description=payload.description,
        vet_name=payload.vet_name,
        cost=payload.cost,
        medications=[m for m in payload.medications or [] if m.strip()] or None,
        follow_up_date=payload.follow_up_date,
    )
    created = await uow.health_records.add(record)
    await uow.commit()
    return created
