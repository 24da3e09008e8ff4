from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.interfaces.repositories.account_settings import (
    AccountSettingsRepository,
)
from farmtrack.domain.models.account_settings import AccountSettings
from farmtrack.infrastructure.db.orm.account_settings import AccountSettingsORM


class AccountSettingsSQLAlchemyRepository(AccountSettingsRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AccountSettingsORM) -> AccountSettings:
        return AccountSettings(
            account_id=orm.account_id,
            milk_price_per_liter=orm.milk_price_per_liter,
            currency=orm.currency,
            updated_at=orm.updated_at,
        )

    async def get(self, account_id: UUID) -> AccountSettings | None:
        orm = await self.session.get(AccountSettingsORM, account_id)
        return self._to_domain(orm) if orm else None

    async def upsert(self, settings: AccountSettings) -> AccountSettings:
        orm = await self.session.get(AccountSettingsORM, settings.account_id)
        if orm is None:
            orm = AccountSettingsORM(account_id=settings.account_id)
            self.session.add(orm)
        orm.milk_price_per_liter = settings.milk_price_per_liter
        orm.currency = settings.currency
        orm.updated_at = settings.updated_at
        await self.session.flush()
        return self._to_domain(orm)
