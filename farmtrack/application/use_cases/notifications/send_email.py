from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.notifications.preferences import may_notify
from farmtrack.application.use_cases.notifications.dispatch import DispatchResult, deliver_email
from farmtrack.config.settings import Settings
from farmtrack.domain.models.notification_log import NotificationChannel
from farmtrack.infrastructure.email.models import EmailService
from farmtrack.infrastructure.email.renderer.engine import EmailTemplateRenderer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SendEmailInput:
    notification_type: str
    message: str
    email: str | None = None
    subject: str | None = None


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    payload: SendEmailInput,
    *,
    email_service: EmailService,
    renderer: EmailTemplateRenderer,
    settings: Settings,
) -> DispatchResult:
    """Send one notification email, honouring the account's preferences.

    An explicit ``email`` only replaces the address; the preferences still
    apply when the account has a profile.
    """
    target = (payload.email or "").strip() or None
    profile = await uow.profiles.get(account_id)
    if profile is None:
        if target is None:
            raise NotFound("User profile not found")
    else:
        decision = may_notify(profile, NotificationChannel.EMAIL, payload.notification_type)
        if not decision:
            logger.info(
                "Email %s skipped for %s: %s",
                payload.notification_type,
                account_id,
                decision.reason,
            )
            return DispatchResult(success=False, message=decision.reason)
        target = target or profile.notification_email
    if not target:
        raise ValidationError("No notification email configured for this user")

    email_id = await deliver_email(
        uow,
        account_id,
        target=target,
        notification_type=payload.notification_type,
        body=payload.message,
        subject=payload.subject,
        email_service=email_service,
        renderer=renderer,
        settings=settings,
    )
    return DispatchResult(success=True, email_id=email_id)
