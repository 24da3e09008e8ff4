from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class InseminationCreate(BaseModel):
    animal_id: UUID
    date: DtDate
    method: str = "artificial"
    notes: str | None = None


class BirthRequest(BaseModel):
    actual_birth_date: DtDate | None = None


class ReminderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    insemination_id: UUID
    reminder_type: str
    reminder_date: DtDate
    is_sent: bool


class InseminationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    animal_id: UUID
    date: DtDate
    method: str
    expected_birth_date: DtDate
    actual_birth_date: DtDate | None = None
    is_pregnant: bool
    notes: str | None = None
    version: int
    created_at: datetime
    updated_at: datetime


class RecordInseminationResponse(InseminationResponse):
    reminders: list[ReminderResponse] = []


class ProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    expected_birth_date: DtDate
    days_elapsed: int
    days_remaining: int
    progress_percent: float
    pregnancy_month: int
    is_overdue: bool


class PregnancyResponse(InseminationResponse):
    ear_tag: str | None = None
    species: str | None = None
    progress: ProgressResponse | None = None


class ReminderItem(BaseModel):
    reminder: ReminderResponse
    label: str
    days: int
    animal_id: UUID | None = None
    ear_tag: str | None = None


class ReminderListResponse(BaseModel):
    due: list[ReminderItem]
    upcoming: list[ReminderItem]


class MilkWarningResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    insemination_id: UUID
    animal_id: UUID
    ear_tag: str | None = None
    kind: str
    pregnancy_month: int
    message: str
