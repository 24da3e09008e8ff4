from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from farmtrack.application.errors import NotificationDeliveryError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.notifications.digest import (
    BirthLine,
    DigestInput,
    VaccinationLine,
    build_daily_digest,
)
from farmtrack.application.notifications.preferences import may_notify
from farmtrack.application.notifications.types import NotificationType, default_subject
from farmtrack.application.use_cases.notifications.dispatch import deliver_email
from farmtrack.config.settings import Settings
from farmtrack.domain.models.notification_log import NotificationChannel
from farmtrack.domain.models.profile import Profile
from farmtrack.domain.services.calendar import days_between
from farmtrack.domain.services.gestation import upcoming_births
from farmtrack.domain.services.vaccinations import due_soon_vaccinations, overdue_vaccinations
from farmtrack.domain.value_objects.animal_status import AnimalStatus
from farmtrack.infrastructure.email.models import EmailService
from farmtrack.infrastructure.email.renderer.engine import EmailTemplateRenderer

logger = logging.getLogger(__name__)

SENT = "sent"
SKIPPED = "skipped"
FAILED = "failed"


@dataclass(slots=True)
class AccountResult:
    account_id: UUID
    status: str
    reason: str | None = None
    email_id: str | None = None


@dataclass(slots=True)
class DailySummaryResult:
    sent: int
    total_users: int
    results: list[AccountResult] = field(default_factory=list)


async def build_digest_input(
    uow: UnitOfWork, profile: Profile, today: date, settings: Settings
) -> DigestInput:
    account_id = profile.account_id
    animals = await uow.animals.list(account_id, status=AnimalStatus.ACTIVE.value)
    ear_tags = {a.id: a.ear_tag for a in animals}

    pregnant = [
        i
        for i in await uow.inseminations.list(account_id, is_pregnant=True)
        if i.animal_id in ear_tags
    ]
    births = upcoming_births(pregnant, today, settings.daily_upcoming_birth_days)

    vaccinations = [v for v in await uow.vaccinations.list(account_id) if v.animal_id in ear_tags]
    overdue = overdue_vaccinations(vaccinations, today)
    upcoming = due_soon_vaccinations(vaccinations, today, settings.daily_upcoming_vaccination_days)

    return DigestInput(
        recipient_name=profile.full_name,
        active_animals=len(animals),
        upcoming_births=[
            BirthLine(ear_tags[i.animal_id], days_between(today, i.expected_birth_date))
            for i in births
        ],
        overdue_vaccinations=[
            VaccinationLine(ear_tags[v.animal_id], v.name, days_between(today, v.next_date))
            for v in overdue
        ],
        upcoming_vaccinations=[
            VaccinationLine(ear_tags[v.animal_id], v.name, days_between(today, v.next_date))
            for v in upcoming
        ],
    )


async def _process_account(
    uow: UnitOfWork,
    profile: Profile,
    today: date,
    *,
    email_service: EmailService,
    renderer: EmailTemplateRenderer,
    settings: Settings,
) -> AccountResult:
    decision = may_notify(profile, NotificationChannel.EMAIL, NotificationType.DAILY_SUMMARY)
    if not decision:
        return AccountResult(profile.account_id, SKIPPED, reason="daily_summary disabled")

    data = await build_digest_input(uow, profile, today, settings)
    if data.active_animals == 0:
        return AccountResult(profile.account_id, SKIPPED, reason="no animals")
    body = build_daily_digest(data)
    if body is None:
        return AccountResult(profile.account_id, SKIPPED, reason="nothing to report")

    email_id = await deliver_email(
        uow,
        profile.account_id,
        target=profile.notification_email,
        notification_type=NotificationType.DAILY_SUMMARY,
        body=body,
        subject=default_subject(NotificationType.DAILY_SUMMARY),
        email_service=email_service,
        renderer=renderer,
        settings=settings,
    )
    return AccountResult(profile.account_id, SENT, email_id=email_id)


async def execute(
    uow: UnitOfWork,
    today: date,
    *,
    email_service: EmailService,
    renderer: EmailTemplateRenderer,
    settings: Settings,
) -> DailySummaryResult:
    """Email the daily digest to every opted-in account, one account at a time.

    A failure for one account is recorded in its result and the run moves on.
    """
    profiles = [p for p in await uow.profiles.list_email_enabled() if p.notification_email]
    results: list[AccountResult] = []
    for profile in profiles:
        try:
            outcome = await _process_account(
                uow,
                profile,
                today,
                email_service=email_service,
                renderer=renderer,
                settings=settings,
            )
        except NotificationDeliveryError as exc:
            outcome = AccountResult(profile.account_id, FAILED, reason=exc.message)
        except Exception as exc:
            logger.error(
                "Daily summary failed for account %s", profile.account_id, exc_info=True
            )
            await uow.rollback()
            outcome = AccountResult(profile.account_id, FAILED, reason=str(exc))
        results.append(outcome)

    sent = sum(1 for r in results if r.status == SENT)
    logger.info(
        "Daily summary run finished: sent=%d skipped=%d failed=%d total=%d",
        sent,
        sum(1 for r in results if r.status == SKIPPED),
        sum(1 for r in results if r.status == FAILED),
        len(profiles),
    )
    return DailySummaryResult(sent=sent, total_users=len(profiles), results=results)
