from __future__ import annotations

from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.insemination import Insemination


class InseminationRepository(Protocol):
    async def add(self, insemination: Insemination) -> Insemination: ...

    async def get(self, account_id: UUID, insemination_id: UUID) -> Insemination | None: ...

    async def list(
        self,
        account_id: UUID,
        *,
        animal_id: UUID | None = None,
        is_pregnant: bool | None = None,
    ) -> list[Insemination]: ...

    async def update(self, insemination: Insemination) -> Insemination: ...

    async def delete(self, account_id: UUID, insemination_id: UUID) -> bool: ...
