from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.vaccination import Vaccination


class VaccinationRepository(Protocol):
    async def add(self, vaccination: Vaccination) -> Vaccination: ...

    async def get(self, account_id: UUID, vaccination_id: UUID) -> Vaccination | None: ...

    async def list(
        self,
        account_id: UUID,
        *,
        animal_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        next_date_from: date | None = None,
        next_date_to: date | None = None,
    ) -> list[Vaccination]: ...

    async def update(self, vaccination: Vaccination) -> Vaccination: ...

    async def delete(self, account_id: UUID, vaccination_id: UUID) -> bool: ...
