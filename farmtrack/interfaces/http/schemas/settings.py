from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class AccountSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    milk_price_per_liter: Decimal
    currency: str
    updated_at: datetime | None = None


class AccountSettingsUpdate(BaseModel):
    milk_price_per_liter: Decimal | None = Field(default=None, gt=0)
    currency: str | None = Field(default=None, min_length=3, max_length=8)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    full_name: str | None = None
    farm_name: str | None = None
    phone: str | None = None
    notification_email: str | None = None
    email_notifications_enabled: bool
    whatsapp_notifications_enabled: bool
    notification_preferences: dict[str, bool]
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(BaseModel):
    full_name: str | None = None
    farm_name: str | None = None
    phone: str | None = None
    notification_email: str | None = None
    email_notifications_enabled: bool | None = None
    whatsapp_notifications_enabled: bool | None = None
    notification_preferences: dict[str, bool] | None = None
