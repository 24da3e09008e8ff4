from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.use_cases.health.create_health_record import parse_record_type
from farmtrack.domain.models.health_record import HealthRecord


@dataclass(slots=True)
class UpdateHealthRecordInput:
    record_type: str | None = None
    title: str | None = None
    date: date | None = None
    description: str | None = None
    vet_name: str | None = None
    cost: Decimal | None = None
    medications: list[str] | None = None
    follow_up_date: date | None = None


async def execute(
    uow: UnitOfWork, account_id: UUID, record_id: UUID, payload: UpdateHealthRecordInput
) -> HealthRecord:
    record = await uow.health_records.get(account_id, record_id)
    if not record:
        raise NotFound("Health record not found")
    if payload.record_type is not None:
        record.record_type = parse_record_type(payload.record_type).value
    if payload.title is not None:
        if not payload.title.strip():
            raise ValidationError("Title is required")
        record.title = payload.title.strip()
    if payload.cost is not None and payload.cost < 0:
        raise ValidationError("Cost cannot be negative")
    for field_name in ("date", "description", "vet_name", "cost", "medications", "follow_up_date"):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(record, field_name, value)
    if record.follow_up_date and record.follow_up_date < record.date:
        raise ValidationError("Follow-up date cannot be before the record date")
    record.bump_version()
    updated = await uow.health_records.update(record)
    await uow.commit()
    return updated
