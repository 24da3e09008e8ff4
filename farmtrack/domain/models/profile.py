from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

# Preference keys stored in Profile.notification_preferences
VACCINATION_REMINDERS = "vaccination_reminders"
BIRTH_REMINDERS = "birth_reminders"
OVERDUE_ALERTS = "overdue_alerts"
DAILY_SUMMARY = "daily_summary"

PREFERENCE_KEYS = (VACCINATION_REMINDERS, BIRTH_REMINDERS, OVERDUE_ALERTS, DAILY_SUMMARY)


@dataclass(slots=True)
class Profile:
    account_id: UUID
    full_name: str | None = None
    farm_name: str | None = None
    phone: str | None = None
    notification_email: str | None = None
    email_notifications_enabled: bool = False
    whatsapp_notifications_enabled: bool = False
    notification_preferences: dict[str, bool] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def preference(self, key: str) -> bool:
        """Missing keys count as enabled."""
        value = (self.notification_preferences or {}).get(key)
        return True if value is None else bool(value)

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
