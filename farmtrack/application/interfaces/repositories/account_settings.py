from __future__ import annotations

from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.account_settings import AccountSettings


class AccountSettingsRepository(Protocol):
    async def get(self, account_id: UUID) -> AccountSettings | None: ...
    async def upsert(self, settings: AccountSettings) -> AccountSettings: ...
