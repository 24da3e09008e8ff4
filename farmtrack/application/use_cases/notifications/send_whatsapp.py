from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from farmtrack.application.errors import NotFound, ValidationError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.notifications.phone import format_whatsapp_number
from farmtrack.application.notifications.preferences import may_notify
from farmtrack.application.use_cases.notifications.dispatch import (
    DispatchResult,
    deliver_whatsapp,
)
from farmtrack.domain.models.notification_log import NotificationChannel
from farmtrack.infrastructure.whatsapp.models import WhatsAppSender

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SendWhatsAppInput:
    notification_type: str
    message: str
    phone_number: str | None = None


async def execute(
    uow: UnitOfWork,
    account_id: UUID,
    payload: SendWhatsAppInput,
    *,
    sender: WhatsAppSender,
    default_country_code: str,
) -> DispatchResult:
    target = (payload.phone_number or "").strip() or None
    profile = await uow.profiles.get(account_id)
    if profile is None:
        if target is None:
            raise NotFound("User profile not found")
    else:
        decision = may_notify(profile, NotificationChannel.WHATSAPP, payload.notification_type)
        if not decision:
            logger.info(
                "WhatsApp %s skipped for %s: %s",
                payload.notification_type,
                account_id,
                decision.reason,
            )
            return DispatchResult(success=False, message=decision.reason)
        target = target or profile.phone
    if not target:
        raise ValidationError("No phone number configured for this user")

    sid = await deliver_whatsapp(
        uow,
        account_id,
        target=format_whatsapp_number(target, default_country_code),
        notification_type=payload.notification_type,
        body=payload.message,
        sender=sender,
    )
    return DispatchResult(success=True, message_sid=sid)
