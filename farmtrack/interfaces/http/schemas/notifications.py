from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SendEmailRequest(BaseModel):
    user_id: UUID
    notification_type: str = Field(min_length=1)
    message: str = Field(min_length=1)
    email: str | None = None
    subject: str | None = None


class SendWhatsAppRequest(BaseModel):
    user_id: UUID
    notification_type: str = Field(min_length=1)
    message: str = Field(min_length=1)
    phone_number: str | None = None


class NotificationResult(BaseModel):
    success: bool
    message: str | None = None
    error: str | None = None
    email_id: str | None = None
    message_sid: str | None = None


class DailySummaryItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    account_id: UUID
    status: str
    reason: str | None = None
    email_id: str | None = None


class DailySummaryResponse(BaseModel):
    success: bool
    sent: int
    total_users: int
    results: list[DailySummaryItem]


class NotificationLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    notification_type: str
    channel: str
    target: str
    message: str
    status: str
    provider_message_id: str | None = None
    error_message: str | None = None
    sent_at: datetime
