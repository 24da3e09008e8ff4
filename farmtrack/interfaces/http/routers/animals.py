from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from farmtrack.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_animal,
    lifecycle,
    list_animals,
    update_animal,
)
from farmtrack.domain.models.animal import Animal
from farmtrack.domain.services.animals import age_in_months, classify_animal, format_age
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.interfaces.http.deps import get_auth_context, get_today, get_uow
from farmtrack.interfaces.http.schemas.animals import (
    AnimalCategoryResponse,
    AnimalCreate,
    AnimalDeathRequest,
    AnimalResponse,
    AnimalSaleRequest,
    AnimalsListResponse,
    AnimalUpdate,
    BatchDeathRequest,
    BatchResultResponse,
    BatchSaleRequest,
)

router = APIRouter(prefix="/animals", tags=["animals"])


def _to_response(animal: Animal, today: date) -> AnimalResponse:
    response = AnimalResponse.model_validate(animal)
    response.age = format_age(animal.birth_date, today)
    category = classify_animal(
        animal.species, animal.gender, age_in_months(animal.birth_date, today)
    )
    response.category = AnimalCategoryResponse.model_validate(category)
    return response


@router.get("", response_model=AnimalsListResponse)
async def list_animals_endpoint(
    status_filter: str | None = Query(None, alias="status"),
    species: str | None = Query(None),
    gender: str | None = Query(None),
    search: str | None = Query(None, description="Matches ear tag or breed"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalsListResponse:
    items = await list_animals.execute(
        uow,
        context.account_id,
        status=status_filter,
        species=species,
        gender=gender,
        search=search,
        limit=limit,
        offset=offset,
    )
    total = await uow.animals.count(context.account_id, status=status_filter)
    return AnimalsListResponse(items=[_to_response(a, today) for a in items], total=total)


@router.post("", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(
    payload: AnimalCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalResponse:
    animal = await create_animal.execute(
        uow, context.account_id, create_animal.CreateAnimalInput(**payload.model_dump())
    )
    return _to_response(animal, today)


@router.post("/batch-sale", response_model=BatchResultResponse)
async def batch_sale(
    payload: BatchSaleRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> BatchResultResponse:
    sale = lifecycle.SaleInput(**payload.model_dump(exclude={"animal_ids"}))
    items = await lifecycle.batch_sell(uow, context.account_id, payload.animal_ids, sale)
    return BatchResultResponse(updated=len(items), items=[_to_response(a, today) for a in items])


@router.post("/batch-death", response_model=BatchResultResponse)
async def batch_death(
    payload: BatchDeathRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> BatchResultResponse:
    death = lifecycle.DeathInput(**payload.model_dump(exclude={"animal_ids"}))
    items = await lifecycle.batch_mark_deceased(
        uow, context.account_id, payload.animal_ids, death
    )
    return BatchResultResponse(updated=len(items), items=[_to_response(a, today) for a in items])


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalResponse:
    animal = await get_animal.execute(uow, context.account_id, animal_id)
    return _to_response(animal, today)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(
    animal_id: UUID,
    payload: AnimalUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalResponse:
    animal = await update_animal.execute(
        uow,
        context.account_id,
        animal_id,
        update_animal.UpdateAnimalInput(**payload.model_dump()),
    )
    return _to_response(animal, today)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_animal.execute(uow, context.account_id, animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{animal_id}/sell", response_model=AnimalResponse)
async def sell_animal(
    animal_id: UUID,
    payload: AnimalSaleRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalResponse:
    animal = await lifecycle.sell(
        uow, context.account_id, animal_id, lifecycle.SaleInput(**payload.model_dump())
    )
    return _to_response(animal, today)


@router.post("/{animal_id}/death", response_model=AnimalResponse)
async def record_death(
    animal_id: UUID,
    payload: AnimalDeathRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalResponse:
    animal = await lifecycle.mark_deceased(
        uow, context.account_id, animal_id, lifecycle.DeathInput(**payload.model_dump())
    )
    return _to_response(animal, today)
