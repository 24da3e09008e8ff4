from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class VaccinationCreate(BaseModel):
    animal_id: UUID
    name: str = Field(min_length=1, max_length=255)
    date: DtDate
    next_date: DtDate | None = None
    completed: bool = False
    notes: str | None = None


class VaccinationUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    date: DtDate | None = None
    next_date: DtDate | None = None
    clear_next_date: bool = False
    completed: bool | None = None
    notes: str | None = None


class BatchVaccinationCreate(BaseModel):
    animal_ids: list[UUID] = Field(min_length=1)
    name: str = Field(min_length=1, max_length=255)
    date: DtDate
    next_date: DtDate | None = None
    notes: str | None = None


class VaccinationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    animal_id: UUID
    name: str
    date: DtDate
    next_date: DtDate | None = None
    completed: bool
    notes: str | None = None
    version: int
    created_at: datetime
    updated_at: datetime
    status: str | None = None
    ear_tag: str | None = None


class VaccinationSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    overdue: int
    upcoming: int
    scheduled: int
    completed: int
    total: int


class VaccinationListResponse(BaseModel):
    items: list[VaccinationResponse]
    summary: VaccinationSummaryResponse


class BatchVaccinationResponse(BaseModel):
    created: int
    items: list[VaccinationResponse]


class CatalogItem(BaseModel):
    value: str
    label: str
