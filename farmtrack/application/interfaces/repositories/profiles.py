from __future__ import annotations

from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.profile import Profile


class ProfileRepository(Protocol):
    async def get(self, account_id: UUID) -> Profile | None: ...
    async def upsert(self, profile: Profile) -> Profile: ...
    async def list_email_enabled(self) -> list[Profile]: ...
