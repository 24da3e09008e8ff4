from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class MilkProductionCreate(BaseModel):
    animal_id: UUID
    date: DtDate
    morning_amount: Decimal = Field(default=Decimal("0"), ge=0)
    evening_amount: Decimal = Field(default=Decimal("0"), ge=0)
    quality: str | None = None
    notes: str | None = None


class MilkProductionUpdate(BaseModel):
    morning_amount: Decimal | None = Field(default=None, ge=0)
    evening_amount: Decimal | None = Field(default=None, ge=0)
    quality: str | None = None
    notes: str | None = None


class MilkProductionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    animal_id: UUID
    date: DtDate
    morning_amount: Decimal
    evening_amount: Decimal
    total_amount: Decimal
    quality: str | None = None
    notes: str | None = None
    version: int
    created_at: datetime
    updated_at: datetime


class MilkSummaryResponse(BaseModel):
    total_today: Decimal
    total_this_month: Decimal
    average_daily: Decimal
    days_with_production: int
    price_per_liter: Decimal
    potential_income: Decimal
    monthly_milk_income: Decimal
    daily_totals: dict[DtDate, Decimal]


class MilkSaleCreate(BaseModel):
    liters: Decimal = Field(gt=0)
    date: DtDate
    price_per_liter: Decimal | None = Field(default=None, gt=0)
    description: str | None = None
