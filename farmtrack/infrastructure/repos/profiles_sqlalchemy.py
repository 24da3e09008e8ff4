from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from farmtrack.application.interfaces.repositories.profiles import ProfileRepository
from farmtrack.domain.models.profile import Profile
from farmtrack.infrastructure.db.orm.profile import ProfileORM


class ProfilesSQLAlchemyRepository(ProfileRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ProfileORM) -> Profile:
        return Profile(
            account_id=orm.account_id,
            full_name=orm.full_name,
            farm_name=orm.farm_name,
            phone=orm.phone,
            notification_email=orm.notification_email,
            email_notifications_enabled=orm.email_notifications_enabled,
            whatsapp_notifications_enabled=orm.whatsapp_notifications_enabled,
            notification_preferences=dict(orm.notification_preferences or {}),
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def get(self, account_id: UUID) -> Profile | None:
        orm = await self.session.get(ProfileORM, account_id)
        return self._to_domain(orm) if orm else None

    async def upsert(self, profile: Profile) -> Profile:
        orm = await self.session.get(ProfileORM, profile.account_id)
        if orm is None:
            orm = ProfileORM(account_id=profile.account_id, created_at=profile.created_at)
            self.session.add(orm)
        orm.full_name = profile.full_name
        orm.farm_name = profile.farm_name
        orm.phone = profile.phone
        orm.notification_email = profile.notification_email
        orm.email_notifications_enabled = profile.email_notifications_enabled
        orm.whatsapp_notifications_enabled = profile.whatsapp_notifications_enabled
        # JSON columns only track reassignment, not in-place mutation
        orm.notification_preferences = dict(profile.notification_preferences)
        orm.updated_at = profile.updated_at
        await self.session.flush()
        return self._to_domain(orm)

    async def list_email_enabled(self) -> list[Profile]:
        stmt = (
            select(ProfileORM)
            .where(ProfileORM.email_notifications_enabled.is_(True))
            .where(ProfileORM.notification_email.is_not(None))
            .order_by(ProfileORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
