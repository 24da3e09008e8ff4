from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends

from farmtrack.application.use_cases.dashboard import alerts, snapshot
from farmtrack.config.settings import Settings
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.interfaces.http.deps import get_app_settings, get_auth_context, get_today, get_uow
from farmtrack.interfaces.http.schemas.breeding import MilkWarningResponse
from farmtrack.interfaces.http.schemas.dashboard import (
    AlertResponse,
    DashboardFinance,
    DashboardMilk,
    DashboardResponse,
)
from farmtrack.interfaces.http.schemas.vaccinations import VaccinationSummaryResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> DashboardResponse:
    data = await snapshot.execute(
        uow, context.account_id, today, settings.default_milk_price_per_liter
    )
    return DashboardResponse(
        active_animals=data.active_animals,
        sold_animals=data.sold_animals,
        deceased_animals=data.deceased_animals,
        categories=data.categories,
        pregnant_count=data.pregnant_count,
        upcoming_births=data.upcoming_births,
        due_reminders=data.due_reminders,
        vaccinations=VaccinationSummaryResponse.model_validate(data.vaccinations),
        milk=DashboardMilk(
            total_today=data.milk.total_today,
            total_this_month=data.milk.total_this_month,
            average_daily=data.milk.average_daily,
            potential_income=data.milk.potential_income,
        ),
        finance_this_month=DashboardFinance(
            total_income=data.finance_this_month.total_income,
            total_expense=data.finance_this_month.total_expense,
            balance=data.finance_this_month.balance,
        ),
        warnings=[MilkWarningResponse.model_validate(w) for w in data.warnings],
    )


@router.get("/alerts", response_model=list[AlertResponse])
async def get_alerts(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> list[AlertResponse]:
    feed = await alerts.execute(uow, context.account_id, today)
    return [AlertResponse.model_validate(alert) for alert in feed]
