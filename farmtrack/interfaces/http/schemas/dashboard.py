from __future__ import annotations

from datetime import date as DtDate
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from farmtrack.interfaces.http.schemas.breeding import MilkWarningResponse
from farmtrack.interfaces.http.schemas.vaccinations import VaccinationSummaryResponse


class DashboardMilk(BaseModel):
    total_today: Decimal
    total_this_month: Decimal
    average_daily: Decimal
    potential_income: Decimal


class DashboardFinance(BaseModel):
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal


class DashboardResponse(BaseModel):
    active_animals: int
    sold_animals: int
    deceased_animals: int
    categories: dict[str, int]
    pregnant_count: int
    upcoming_births: int
    due_reminders: int
    vaccinations: VaccinationSummaryResponse
    milk: DashboardMilk
    finance_this_month: DashboardFinance
    warnings: list[MilkWarningResponse]


class AlertResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    kind: str
    reference_id: UUID
    animal_id: UUID
    ear_tag: str | None = None
    title: str
    message: str
    due_date: DtDate
    days: int
    priority: str
    is_read: bool


class MonthlyActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    month: DtDate
    label: str
    animals_added: int
    vaccinations: int
    births_expected: int


class ActivityReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    months: list[MonthlyActivityResponse]
    species_distribution: dict[str, int]
    gender_distribution: dict[str, int]
    pregnant_count: int
    vaccination_completion_rate: int
    total_animals: int
