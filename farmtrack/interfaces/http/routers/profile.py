from __future__ import annotations

from fastapi import APIRouter, Depends

from farmtrack.application.use_cases.settings import profile
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.interfaces.http.deps import get_auth_context, get_uow
from farmtrack.interfaces.http.schemas.settings import ProfileResponse, ProfileUpdate

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ProfileResponse:
    current = await profile.get(uow, context.account_id)
    return ProfileResponse.model_validate(current)


@router.put("", response_model=ProfileResponse)
async def upsert_profile(
    payload: ProfileUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ProfileResponse:
    saved = await profile.upsert(
        uow, context.account_id, profile.UpsertProfileInput(**payload.model_dump())
    )
    return ProfileResponse.model_validate(saved)
