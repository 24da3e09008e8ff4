from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from farmtrack.application.use_cases.vaccinations import (
    batch_vaccinate,
    create_vaccination,
    delete_vaccination,
    list_vaccinations,
    update_vaccination,
)
from farmtrack.domain.models.vaccination import VACCINE_CATALOG, Vaccination
from farmtrack.domain.services.vaccinations import vaccination_status
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.interfaces.http.deps import get_auth_context, get_today, get_uow
from farmtrack.interfaces.http.schemas.vaccinations import (
    BatchVaccinationCreate,
    BatchVaccinationResponse,
    CatalogItem,
    VaccinationCreate,
    VaccinationListResponse,
    VaccinationResponse,
    VaccinationSummaryResponse,
    VaccinationUpdate,
)

router = APIRouter(prefix="/vaccinations", tags=["vaccinations"])


def _to_response(
    vaccination: Vaccination, today: date, ear_tag: str | None = None
) -> VaccinationResponse:
    response = VaccinationResponse.model_validate(vaccination)
    response.status = vaccination_status(vaccination.next_date, today).value
    response.ear_tag = ear_tag
    return response


@router.get("/catalog", response_model=list[CatalogItem])
async def vaccine_catalog(
    context: AuthContext = Depends(get_auth_context),
) -> list[CatalogItem]:
    return [CatalogItem(**item) for item in VACCINE_CATALOG]


@router.get("", response_model=VaccinationListResponse)
async def list_vaccinations_endpoint(
    animal_id: UUID | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> VaccinationListResponse:
    result = await list_vaccinations.execute(
        uow, context.account_id, today, animal_id=animal_id, status=status_filter
    )
    items = []
    for view in result.items:
        response = VaccinationResponse.model_validate(view.vaccination)
        response.status = view.status.value
        response.ear_tag = view.ear_tag
        items.append(response)
    return VaccinationListResponse(
        items=items, summary=VaccinationSummaryResponse.model_validate(result.summary)
    )


@router.post("", response_model=VaccinationResponse, status_code=status.HTTP_201_CREATED)
async def create_vaccination_endpoint(
    payload: VaccinationCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> VaccinationResponse:
    vaccination = await create_vaccination.execute(
        uow,
        context.account_id,
        create_vaccination.CreateVaccinationInput(**payload.model_dump()),
    )
    return _to_response(vaccination, today)


@router.post("/batch", response_model=BatchVaccinationResponse, status_code=status.HTTP_201_CREATED)
async def batch_vaccinate_endpoint(
    payload: BatchVaccinationCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> BatchVaccinationResponse:
    created = await batch_vaccinate.execute(
        uow, context.account_id, batch_vaccinate.BatchVaccinateInput(**payload.model_dump())
    )
    return BatchVaccinationResponse(
        created=len(created), items=[_to_response(v, today) for v in created]
    )


@router.put("/{vaccination_id}", response_model=VaccinationResponse)
async def update_vaccination_endpoint(
    vaccination_id: UUID,
    payload: VaccinationUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> VaccinationResponse:
    vaccination = await update_vaccination.execute(
        uow,
        context.account_id,
        vaccination_id,
        update_vaccination.UpdateVaccinationInput(**payload.model_dump()),
    )
    return _to_response(vaccination, today)


@router.delete("/{vaccination_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vaccination_endpoint(
    vaccination_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_vaccination.execute(uow, context.account_id, vaccination_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
