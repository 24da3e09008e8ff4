from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.transaction import Transaction


class TransactionRepository(Protocol):
    async def add(self, transaction: Transaction) -> Transaction: ...

    async def get(self, account_id: UUID, transaction_id: UUID) -> Transaction | None: ...

    async def list(
        self,
        account_id: UUID,
        *,
        type: str | None = None,
        category: str | None = None,
        animal_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Transaction]: ...

    async def delete(self, account_id: UUID, transaction_id: UUID) -> bool: ...
