from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from farmtrack.application.use_cases.breeding import (
    complete_birth,
    delete_insemination,
    list_pregnancies,
    month_warnings,
    record_insemination,
    reminders,
)
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.interfaces.http.deps import get_auth_context, get_today, get_uow
from farmtrack.interfaces.http.schemas.breeding import (
    BirthRequest,
    InseminationCreate,
    InseminationResponse,
    MilkWarningResponse,
    PregnancyResponse,
    ProgressResponse,
    RecordInseminationResponse,
    ReminderItem,
    ReminderListResponse,
    ReminderResponse,
)

router = APIRouter(prefix="/breeding", tags=["breeding"])


def _reminder_item(view: reminders.ReminderView) -> ReminderItem:
    return ReminderItem(
        reminder=ReminderResponse.model_validate(view.reminder),
        label=view.label,
        days=view.days,
        animal_id=view.animal_id,
        ear_tag=view.ear_tag,
    )


@router.post(
    "/inseminations",
    response_model=RecordInseminationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_insemination_endpoint(
    payload: InseminationCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> RecordInseminationResponse:
    result = await record_insemination.execute(
        uow,
        context.account_id,
        record_insemination.RecordInseminationInput(**payload.model_dump()),
    )
    response = RecordInseminationResponse.model_validate(result.insemination)
    response.reminders = [ReminderResponse.model_validate(r) for r in result.reminders]
    return response


@router.get("/pregnancies", response_model=list[PregnancyResponse])
async def list_pregnancies_endpoint(
    animal_id: UUID | None = Query(None),
    include_completed: bool = Query(False),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> list[PregnancyResponse]:
    views = await list_pregnancies.execute(
        uow,
        context.account_id,
        today,
        animal_id=animal_id,
        only_pregnant=not include_completed,
    )
    items = []
    for view in views:
        response = PregnancyResponse.model_validate(view.insemination)
        response.ear_tag = view.ear_tag
        response.species = view.species
        if view.progress is not None:
            response.progress = ProgressResponse.model_validate(view.progress)
        items.append(response)
    return items


@router.post("/inseminations/{insemination_id}/birth", response_model=InseminationResponse)
async def complete_birth_endpoint(
    insemination_id: UUID,
    payload: BirthRequest | None = None,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> InseminationResponse:
    insemination = await complete_birth.execute(
        uow,
        context.account_id,
        insemination_id,
        today,
        actual_birth_date=payload.actual_birth_date if payload else None,
    )
    return InseminationResponse.model_validate(insemination)


@router.delete("/inseminations/{insemination_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_insemination_endpoint(
    insemination_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_insemination.execute(uow, context.account_id, insemination_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/reminders", response_model=ReminderListResponse)
async def list_reminders_endpoint(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> ReminderListResponse:
    result = await reminders.list_reminders(uow, context.account_id, today)
    return ReminderListResponse(
        due=[_reminder_item(v) for v in result.due],
        upcoming=[_reminder_item(v) for v in result.upcoming],
    )


@router.post("/reminders/{reminder_id}/sent", response_model=ReminderResponse)
async def mark_reminder_sent(
    reminder_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ReminderResponse:
    reminder = await reminders.mark_sent(uow, context.account_id, reminder_id)
    return ReminderResponse.model_validate(reminder)


@router.get("/warnings", response_model=list[MilkWarningResponse])
async def milk_warnings(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> list[MilkWarningResponse]:
    warnings = await month_warnings.execute(uow, context.account_id, today)
    return [MilkWarningResponse.model_validate(w) for w in warnings]
