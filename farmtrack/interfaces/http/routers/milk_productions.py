from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from farmtrack.application.use_cases.milk import (
    delete_production,
    list_productions,
    record_production,
    record_sale,
    summary,
    update_production,
)
from farmtrack.config.settings import Settings
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.interfaces.http.deps import get_app_settings, get_auth_context, get_today, get_uow
from farmtrack.interfaces.http.schemas.milk_productions import (
    MilkProductionCreate,
    MilkProductionResponse,
    MilkProductionUpdate,
    MilkSaleCreate,
    MilkSummaryResponse,
)
from farmtrack.interfaces.http.schemas.transactions import TransactionResponse

router = APIRouter(prefix="/milk-productions", tags=["milk-productions"])


@router.get("", response_model=list[MilkProductionResponse])
async def list_productions_endpoint(
    animal_id: UUID | None = Query(None),
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[MilkProductionResponse]:
    items = await list_productions.execute(
        uow, context.account_id, animal_id=animal_id, date_from=date_from, date_to=date_to
    )
    return [MilkProductionResponse.model_validate(item) for item in items]


@router.post("", response_model=MilkProductionResponse, status_code=status.HTTP_201_CREATED)
async def create_production(
    payload: MilkProductionCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> MilkProductionResponse:
    production = await record_production.execute(
        uow,
        context.account_id,
        record_production.RecordProductionInput(**payload.model_dump()),
    )
    return MilkProductionResponse.model_validate(production)


@router.get("/summary", response_model=MilkSummaryResponse)
async def production_summary(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
) -> MilkSummaryResponse:
    overview = await summary.execute(
        uow, context.account_id, today, settings.default_milk_price_per_liter
    )
    data = overview.summary
    return MilkSummaryResponse(
        total_today=data.total_today,
        total_this_month=data.total_this_month,
        average_daily=data.average_daily,
        days_with_production=data.days_with_production,
        price_per_liter=data.price_per_liter,
        potential_income=data.potential_income,
        monthly_milk_income=overview.monthly_milk_income,
        daily_totals=data.daily_totals,
    )


@router.post("/sales", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def record_milk_sale(
    payload: MilkSaleCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
) -> TransactionResponse:
    transaction = await record_sale.execute(
        uow,
        context.account_id,
        record_sale.RecordMilkSaleInput(**payload.model_dump()),
        settings.default_milk_price_per_liter,
    )
    return TransactionResponse.model_validate(transaction)


@router.put("/{production_id}", response_model=MilkProductionResponse)
async def update_production_endpoint(
    production_id: UUID,
    payload: MilkProductionUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> MilkProductionResponse:
    production = await update_production.execute(
        uow,
        context.account_id,
        production_id,
        update_production.UpdateProductionInput(**payload.model_dump()),
    )
    return MilkProductionResponse.model_validate(production)


@router.delete("/{production_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_production_endpoint(
    production_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_production.execute(uow, context.account_id, production_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
