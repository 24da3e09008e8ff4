from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from farmtrack.application.use_cases.health import (
    create_health_record,
    delete_health_record,
    expenses,
    list_health_records,
    update_health_record,
)
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.interfaces.http.deps import get_auth_context, get_uow
from farmtrack.interfaces.http.schemas.health_records import (
    HealthExpensesResponse,
    HealthRecordCreate,
    HealthRecordResponse,
    HealthRecordUpdate,
)

router = APIRouter(prefix="/health-records", tags=["health-records"])


@router.get("/expenses", response_model=HealthExpensesResponse)
async def health_expenses_endpoint(
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> HealthExpensesResponse:
    result = await expenses.execute(
        uow, context.account_id, date_from=date_from, date_to=date_to
    )
    return HealthExpensesResponse.model_validate(result)


@router.get("", response_model=list[HealthRecordResponse])
async def list_health_records_endpoint(
    animal_id: UUID | None = Query(None),
    record_type: str | None = Query(None),
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[HealthRecordResponse]:
    items = await list_health_records.execute(
        uow,
        context.account_id,
        animal_id=animal_id,
        record_type=record_type,
        date_from=date_from,
        date_to=date_to,
    )
    return [HealthRecordResponse.model_validate(item) for item in items]


@router.post("", response_model=HealthRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_health_record_endpoint(
    payload: HealthRecordCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> HealthRecordResponse:
    record = await create_health_record.execute(
        uow,
        context.account_id,
        create_health_record.CreateHealthRecordInput(**payload.model_dump()),
    )
    return HealthRecordResponse.model_validate(record)


@router.put("/{record_id}", response_model=HealthRecordResponse)
async def update_health_record_endpoint(
    record_id: UUID,
    payload: HealthRecordUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> HealthRecordResponse:
    record = await update_health_record.execute(
        uow,
        context.account_id,
        record_id,
        update_health_record.UpdateHealthRecordInput(**payload.model_dump()),
    )
    return HealthRecordResponse.model_validate(record)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_health_record_endpoint(
    record_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_health_record.execute(uow, context.account_id, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
