from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.health_record import HealthRecord


class HealthRecordRepository(Protocol):
    async def add(self, record: HealthRecord) -> HealthRecord: ...

    async def get(self, account_id: UUID, record_id: UUID) -> HealthRecord | None: ...

    async def list(
        self,
        account_id: UUID,
        *,
        animal_id: UUID | None = None,
        record_type: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[HealthRecord]: ...

    async def update(self, record: HealthRecord) -> HealthRecord: ...

    async def delete(self, account_id: UUID, record_id: UUID) -> bool: ...
