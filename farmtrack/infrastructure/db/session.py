from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from farmtrack.application.interfaces.unit_of_work import UnitOfWork

REPOSITORY_ATTRS = (
    "animals",
    "vaccinations",
    "inseminations",
    "pregnancy_reminders",
    "transactions",
    "milk_productions",
    "health_records",
    "profiles",
    "notification_logs",
    "account_settings",
)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str) -> AsyncEngine:
    engine = create_async_engine(database_url, echo=False, future=True)
    if engine.dialect.name == "sqlite":
        # cascades on animal deletion rely on enforced foreign keys
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        for attr in REPOSITORY_ATTRS:
            setattr(self, attr, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from farmtrack.infrastructure.repos.account_settings_sqlalchemy import (
            AccountSettingsSQLAlchemyRepository,
        )
        from farmtrack.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from farmtrack.infrastructure.repos.health_records_sqlalchemy import (
            HealthRecordsSQLAlchemyRepository,
        )
        from farmtrack.infrastructure.repos.inseminations_sqlalchemy import (
            InseminationsSQLAlchemyRepository,
        )
        from farmtrack.infrastructure.repos.milk_productions_sqlalchemy import (
            MilkProductionsSQLAlchemyRepository,
        )
        from farmtrack.infrastructure.repos.notification_logs_sqlalchemy import (
            NotificationLogsSQLAlchemyRepository,
        )
        from farmtrack.infrastructure.repos.pregnancy_reminders_sqlalchemy import (
            PregnancyRemindersSQLAlchemyRepository,
        )
        from farmtrack.infrastructure.repos.profiles_sqlalchemy import (
            ProfilesSQLAlchemyRepository,
        )
        from farmtrack.infrastructure.repos.transactions_sqlalchemy import (
            TransactionsSQLAlchemyRepository,
        )
        from farmtrack.infrastructure.repos.vaccinations_sqlalchemy import (
            VaccinationsSQLAlchemyRepository,
        )

        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.vaccinations = VaccinationsSQLAlchemyRepository(self.session)
        self.inseminations = InseminationsSQLAlchemyRepository(self.session)
        self.pregnancy_reminders = PregnancyRemindersSQLAlchemyRepository(self.session)
        self.transactions = TransactionsSQLAlchemyRepository(self.session)
        self.milk_productions = MilkProductionsSQLAlchemyRepository(self.session)
        self.health_records = HealthRecordsSQLAlchemyRepository(self.session)
        self.profiles = ProfilesSQLAlchemyRepository(self.session)
        self.notification_logs = NotificationLogsSQLAlchemyRepository(self.session)
        self.account_settings = AccountSettingsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
