from __future__ import annotations

from dataclasses import dataclass

from farmtrack.domain.models.notification_log import NotificationChannel
from farmtrack.domain.models.profile import Profile

from .types import NotificationType, preference_key

_CHANNEL_LABELS = {
    NotificationChannel.EMAIL: "Email",
    NotificationChannel.WHATSAPP: "WhatsApp",
}


@dataclass(frozen=True, slots=True)
class NotifyDecision:
    allowed: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.allowed


def may_notify(
    profile: Profile, channel: NotificationChannel, notification_type: str
) -> NotifyDecision:
    """Decide whether an account wants `notification_type` messages on `channel`.

    The channel switch is checked first; test messages then bypass the
    per-category preferences. Preference keys that were never saved count
    as enabled.
    """
    if channel is NotificationChannel.EMAIL:
        channel_enabled = profile.email_notifications_enabled
    else:
        channel_enabled = profile.whatsapp_notifications_enabled
    if not channel_enabled:
        return NotifyDecision(
            False, f"{_CHANNEL_LABELS[channel]} notifications disabled for this user"
        )
    if notification_type == NotificationType.TEST:
        return NotifyDecision(True)
    if not profile.preference(preference_key(notification_type)):
        return NotifyDecision(False, f"{notification_type} notifications disabled")
    return NotifyDecision(True)
