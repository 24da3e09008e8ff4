from __future__ import annotations

from typing import Protocol
from uuid import UUID

from farmtrack.domain.models.pregnancy_reminder import PregnancyReminder


class PregnancyReminderRepository(Protocol):
    async def add(self, reminder: PregnancyReminder) -> PregnancyReminder: ...

    async def get(self, account_id: UUID, reminder_id: UUID) -> PregnancyReminder | None: ...

    async def list(
        self,
        account_id: UUID,
        *,
        insemination_id: UUID | None = None,
        is_sent: bool | None = None,
    ) -> list[PregnancyReminder]: ...

    async def update(self, reminder: PregnancyReminder) -> PregnancyReminder: ...

    async def delete_for_insemination(self, account_id: UUID, insemination_id: UUID) -> int: ...
