from __future__ import annotations

from typing import Protocol

from farmtrack.application.interfaces.repositories.account_settings import (
    AccountSettingsRepository,
)
from farmtrack.application.interfaces.repositories.animals import AnimalRepository
from farmtrack.application.interfaces.repositories.health_records import HealthRecordRepository
from farmtrack.application.interfaces.repositories.inseminations import InseminationRepository
from farmtrack.application.interfaces.repositories.milk_productions import (
    MilkProductionsRepository,
)
from farmtrack.application.interfaces.repositories.notification_logs import (
    NotificationLogRepository,
)
from farmtrack.application.interfaces.repositories.pregnancy_reminders import (
    PregnancyReminderRepository,
)
from farmtrack.application.interfaces.repositories.profiles import ProfileRepository
from farmtrack.application.interfaces.repositories.transactions import TransactionRepository
from farmtrack.application.interfaces.repositories.vaccinations import VaccinationRepository


class UnitOfWork(Protocol):
    animals: AnimalRepository
    vaccinations: VaccinationRepository
    inseminations: InseminationRepository
    pregnancy_reminders: PregnancyReminderRepository
    transactions: TransactionRepository
    milk_productions: MilkProductionsRepository
    health_records: HealthRecordRepository
    profiles: ProfileRepository
    notification_logs: NotificationLogRepository
    account_settings: AccountSettingsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
