from __future__ import annotations

from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, account_id: UUID, animal_id: UUID) -> Animal | None: ...

    async def get_many(self, account_id: UUID, animal_ids: list[UUID]) -> list[Animal]: ...

    async def list(
        self,
        account_id: UUID,
        *,
        status: str | None = None,
        species: str | None = None,
        gender: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Animal]: ...

    async def count(self, account_id: UUID, *, status: str | None = None) -> int: ...

    async def update(
        self,
        account_id: UUID,
        animal_id: UUID,
        data: dict,
        expected_version: int | None = None,
    ) -> Animal | None: ...

    async def save(self, animal: Animal) -> Animal: ...

    async def delete(self, account_id: UUID, animal_id: UUID) -> bool: ...
