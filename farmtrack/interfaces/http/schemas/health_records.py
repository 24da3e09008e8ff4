from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class HealthRecordCreate(BaseModel):
    animal_id: UUID
    record_type: str
    title: str = Field(min_length=1, max_length=255)
    date: DtDate
    description: str | None = None
    vet_name: str | None = None
    cost: Decimal | None = Field(default=None, ge=0)
    medications: list[str] | None = None
    follow_up_date: DtDate | None = None


class HealthRecordUpdate(BaseModel):
    record_type: str | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    date: DtDate | None = None
    description: str | None = None
    vet_name: str | None = None
    cost: Decimal | None = Field(default=None, ge=0)
    medications: list[str] | None = None
    follow_up_date: DtDate | None = None


class HealthRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    animal_id: UUID
    record_type: str
    title: str
    date: DtDate
    description: str | None = None
    vet_name: str | None = None
    cost: Decimal | None = None
    medications: list[str] | None = None
    follow_up_date: DtDate | None = None
    version: int
    created_at: datetime
    updated_at: datetime


class HealthExpensesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    total: Decimal
    by_type: dict[str, Decimal]
    count: int
