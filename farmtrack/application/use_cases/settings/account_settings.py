from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from farmtrack.application.errors import ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.account_settings import DEFAULT_MILK_PRICE_PER_LITER, AccountSettings


@dataclass(slots=True)
class UpdateAccountSettingsInput:
    milk_price_per_liter: Decimal | None = None
    currency: str | None = None


async def get(
    uow: UnitOfWork,
    account_id: UUID,
    default_price: Decimal = DEFAULT_MILK_PRICE_PER_LITER,
) -> AccountSettings:
    """Stored settings for the account, or defaults when none were saved yet."""
    existing = await uow.account_settings.get(account_id)
    if existing:
        return existing
    return AccountSettings(account_id=account_id, milk_price_per_liter=default_price)


async def update(
    uow: UnitOfWork,
    account_id: UUID,
    payload: UpdateAccountSettingsInput,
    default_price: Decimal = DEFAULT_MILK_PRICE_PER_LITER,
) -> AccountSettings:
    current = await get(uow, account_id, default_price)
    if payload.milk_price_per_liter is not None:
        if payload.milk_price_per_liter <= 0:
            raise ValidationError("Price per liter must be positive")
        current.milk_price_per_liter = payload.milk_price_per_liter
    if payload.currency is not None:
        current.currency = payload.currency.upper()
    current.updated_at = datetime.now(timezone.utc)
    saved = await uow.account_settings.upsert(current)
    await uow.commit()
    return saved
