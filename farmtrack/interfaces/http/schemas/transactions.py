from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TransactionCreate(BaseModel):
    type: str
    category: str
    amount: Decimal = Field(gt=0)
    date: DtDate
    animal_id: UUID | None = None
    description: str | None = None


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    type: str
    category: str
    amount: Decimal
    date: DtDate
    animal_id: UUID | None = None
    description: str | None = None
    version: int
    created_at: datetime
    updated_at: datetime


class MonthlyFinanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    month: DtDate
    income: Decimal
    expense: Decimal
    balance: Decimal


class FinanceSummaryResponse(BaseModel):
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    income_by_category: dict[str, Decimal]
    expense_by_category: dict[str, Decimal]
    monthly: list[MonthlyFinanceResponse] = []


class CategoryOption(BaseModel):
    value: str
    label: str


class CategoriesResponse(BaseModel):
    income: list[CategoryOption]
    expense: list[CategoryOption]
