from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.milk_production import MilkProduction


class MilkProductionsRepository(Protocol):
    async def add(self, production: MilkProduction) -> MilkProduction: ...

    async def get(self, account_id: UUID, production_id: UUID) -> MilkProduction | None: ...

    async def list(
        self,
        account_id: UUID,
        *,
        animal_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[MilkProduction]: ...

    async def update(self, production: MilkProduction) -> MilkProduction: ...

    async def delete(self, account_id: UUID, production_id: UUID) -> bool: ...
