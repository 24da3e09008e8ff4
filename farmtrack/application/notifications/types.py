from __future__ import annotations

from farmtrack.domain.models.profile import (
    BIRTH_REMINDERS,
    DAILY_SUMMARY,
    OVERDUE_ALERTS,
    VACCINATION_REMINDERS,
)


class NotificationType:
    """Notification categories accepted by the email and WhatsApp endpoints."""

    VACCINATION_REMINDER = "vaccination_reminder"
    BIRTH_REMINDER = "birth_reminder"
    OVERDUE_ALERT = "overdue_alert"
    DAILY_SUMMARY = "daily_summary"
    TEST = "test"


# Anything not listed here falls under the overdue alerts preference
PREFERENCE_KEY_BY_TYPE: dict[str, str] = {
    NotificationType.VACCINATION_REMINDER: VACCINATION_REMINDERS,
    NotificationType.BIRTH_REMINDER: BIRTH_REMINDERS,
    NotificationType.DAILY_SUMMARY: DAILY_SUMMARY,
}

DEFAULT_SUBJECTS: dict[str, str] = {
    NotificationType.VACCINATION_REMINDER: "💉 Vaccination reminder - FarmTrack",
    NotificationType.BIRTH_REMINDER: "🐄 Birth reminder - FarmTrack",
    NotificationType.OVERDUE_ALERT: "⚠️ Overdue alert - FarmTrack",
    NotificationType.DAILY_SUMMARY: "📊 Daily summary - FarmTrack",
    NotificationType.TEST: "✅ Test notification - FarmTrack",
}
GENERIC_SUBJECT = "📬 FarmTrack notification"

ICONS: dict[str, str] = {
    NotificationType.VACCINATION_REMINDER: "💉",
    NotificationType.BIRTH_REMINDER: "🐄",
    NotificationType.OVERDUE_ALERT: "⚠️",
    NotificationType.DAILY_SUMMARY: "📊",
    NotificationType.TEST: "✅",
}
GENERIC_ICON = "📬"

TITLES: dict[str, str] = {
    NotificationType.VACCINATION_REMINDER: "Vaccination reminder",
    NotificationType.BIRTH_REMINDER: "Birth reminder",
    NotificationType.OVERDUE_ALERT: "Overdue alert",
    NotificationType.DAILY_SUMMARY: "Daily summary",
    NotificationType.TEST: "Test notification",
}
GENERIC_TITLE = "Notification"


def preference_key(notification_type: str) -> str:
    return PREFERENCE_KEY_BY_TYPE.get(notification_type, OVERDUE_ALERTS)


def default_subject(notification_type: str) -> str:
    return DEFAULT_SUBJECTS.get(notification_type, GENERIC_SUBJECT)
