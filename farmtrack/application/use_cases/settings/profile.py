from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.domain.models.profile import PREFERENCE_KEYS, Profile


@dataclass(slots=True)
class UpsertProfileInput:
    full_name: str | None = None
    farm_name: str | None = None
    phone: str | None = None
    notification_email: str | None = None
    email_notifications_enabled: bool | None = None
    whatsapp_notifications_enabled: bool | None = None
    notification_preferences: dict[str, bool] | None = None


async def get(uow: UnitOfWork, account_id: UUID) -> Profile:
    profile = await uow.profiles.get(account_id)
    if not profile:
        raise NotFound("User profile not found")
    return profile


async def upsert(uow: UnitOfWork, account_id: UUID, payload: UpsertProfileInput) -> Profile:
    profile = await uow.profiles.get(account_id) or Profile(account_id=account_id)
    for field_name in (
        "full_name",
        "farm_name",
        "phone",
        "notification_email",
        "email_notifications_enabled",
        "whatsapp_notifications_enabled",
    ):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(profile, field_name, value)
    if payload.notification_preferences is not None:
        unknown = sorted(set(payload.notification_preferences) - set(PREFERENCE_KEYS))
        if unknown:
            raise ValidationError("Unknown notification preference", details={"keys": unknown})
        profile.notification_preferences = {
            **(profile.notification_preferences or {}),
            **payload.notification_preferences,
        }
    profile.touch()
    saved = await uow.profiles.upsert(profile)
    await uow.commit()
    return saved
