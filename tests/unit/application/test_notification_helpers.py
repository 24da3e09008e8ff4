from __future__ import annotations

from uuid import uuid4

from farmtrack.application.notifications.digest import (
    BirthLine,
    DigestInput,
    VaccinationLine,
    build_daily_digest,
)
from farmtrack.application.notifications.phone import format_whatsapp_number
from farmtrack.application.notifications.preferences import may_notify
from farmtrack.application.notifications.types import NotificationType, preference_key
from farmtrack.domain.models.notification_log import NotificationChannel
from farmtrack.domain.models.profile import OVERDUE_ALERTS, Profile


def test_phone_numbers_are_normalized_to_e164():
    assert format_whatsapp_number("0532 123 45 67") == "+905321234567"
    assert format_whatsapp_number("(532) 123-45-67") == "+905321234567"
    assert format_whatsapp_number("+44 20 7946 0958") == "+442079460958"
    assert format_whatsapp_number("5321234567", default_country_code="+49") == "+495321234567"


def test_unknown_types_map_to_overdue_alerts_preference():
    assert preference_key("something_else") == OVERDUE_ALERTS


def test_disabled_channel_blocks_everything():
    profile = Profile(account_id=uuid4(), email_notifications_enabled=False)
    decision = may_notify(profile, NotificationChannel.EMAIL, NotificationType.TEST)
    assert not decision
    assert decision.reason == "Email notifications disabled for this user"


def test_missing_preference_counts_as_enabled():
    profile = Profile(account_id=uuid4(), whatsapp_notifications_enabled=True)
    assert may_notify(profile, NotificationChannel.WHATSAPP, NotificationType.BIRTH_REMINDER)


def test_disabled_category_blocks_but_test_messages_pass():
    profile = Profile(
        account_id=uuid4(),
        email_notifications_enabled=True,
        notification_preferences={"vaccination_reminders": False},
    )
    blocked = may_notify(profile, NotificationChannel.EMAIL, NotificationType.VACCINATION_REMINDER)
    assert not blocked
    assert blocked.reason == "vaccination_reminder notifications disabled"
    assert may_notify(profile, NotificationChannel.EMAIL, NotificationType.TEST)


def test_digest_is_none_without_news():
    assert build_daily_digest(DigestInput(recipient_name="Ayşe", active_animals=12)) is None


def test_digest_lists_sections_and_caps_vaccinations():
    data = DigestInput(
        recipient_name="Ayşe",
        active_animals=12,
        upcoming_births=[BirthLine("TR-1", 0), BirthLine("TR-2", 3)],
        overdue_vaccinations=[VaccinationLine(f"TR-{i}", "ibr", -i) for i in range(1, 8)],
    )
    body = build_daily_digest(data)
    assert body is not None
    assert body.startswith("Good morning, Ayşe!")
    assert "🐄 Active animals: 12" in body
    assert "• TR-1: birth expected today" in body
    assert "• TR-2: 3 days until birth" in body
    assert "⚠️ OVERDUE VACCINES (7):" in body
    assert "• TR-5: ibr - 5 days late!" in body
    assert "TR-6: ibr" not in body
    assert "... and 2 more" in body
    assert "UPCOMING VACCINES" not in body
