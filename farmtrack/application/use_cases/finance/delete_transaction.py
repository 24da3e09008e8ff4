from __future__ import annotations

from uuid import UUID

from farmtrack.application.errors import NotFound
from farmtrack.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, account_id: UUID, transaction_id: UUID) -> None:
    deleted = await uow.transactions.delete(account_id, transaction_id)
    if not deleted:
        raise NotFound("Transaction not found")
    await uow.commit()
