from __future__ import annotations

from fastapi import APIRouter, Depends

from farmtrack.application.use_cases.settings import account_settings
from farmtrack.config.settings import Settings
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.interfaces.http.deps import get_app_settings, get_auth_context, get_uow
from farmtrack.interfaces.http.schemas.settings import (
    AccountSettingsResponse,
    AccountSettingsUpdate,
)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=AccountSettingsResponse)
async def get_account_settings(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
) -> AccountSettingsResponse:
    current = await account_settings.get(
        uow, context.account_id, settings.default_milk_price_per_liter
    )
    return AccountSettingsResponse.model_validate(current)


@router.put("", response_model=AccountSettingsResponse)
async def update_account_settings(
    payload: AccountSettingsUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
) -> AccountSettingsResponse:
    updated = await account_settings.update(
        uow,
        context.account_id,
        account_settings.UpdateAccountSettingsInput(**payload.model_dump()),
        settings.default_milk_price_per_liter,
    )
    return AccountSettingsResponse.model_validate(updated)
