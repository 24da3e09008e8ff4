"""Shared delivery step for the notification use cases.

Every attempt that reaches a gateway leaves a NotificationLog row, whether it
succeeded or not. Gateway failures are re-raised after the log entry is
committed so callers can report them.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from uuid import UUID

from farmtrack.application.errors import NotificationDeliveryError
from farmtrack.application.interfaces.unit_of_work import UnitOfWork
from farmtrack.application.notifications.types import (
    GENERIC_ICON,
    GENERIC_TITLE,
    ICONS,
    TITLES,
    default_subject,
)
from farmtrack.config.settings import Settings
from farmtrack.domain.models.notification_log import (
    DeliveryStatus,
    NotificationChannel,
    NotificationLog,
)
from farmtrack.infrastructure.email.models import EmailService
from farmtrack.infrastructure.email.renderer.engine import EmailTemplateRenderer
from farmtrack.infrastructure.whatsapp.models import WhatsAppMessage, WhatsAppSender

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DispatchResult:
    success: bool
    message: str | None = None
    email_id: str | None = None
    message_sid: str | None = None


def serialize_provider_error(exc: NotificationDeliveryError) -> str:
    payload = exc.provider_error if exc.provider_error is not None else {"message": exc.message}
    return json.dumps(payload, default=str)


async def _record(
    uow: UnitOfWork,
    account_id: UUID,
    notification_type: str,
    channel: NotificationChannel,
    target: str,
    body: str,
    status: DeliveryStatus,
    *,
    provider_message_id: str | None = None,
    error_message: str | None = None,
) -> None:
    await uow.notification_logs.add(
        NotificationLog.create(
            account_id=account_id,
            notification_type=notification_type,
            channel=channel,
            target=target,
            message=body,
            status=status,
            provider_message_id=provider_message_id,
            error_message=error_message,
        )
    )
    await uow.commit()


async def deliver_email(
    uow: UnitOfWork,
    account_id: UUID,
    *,
    target: str,
    notification_type: str,
    body: str,
    subject: str | None,
    email_service: EmailService,
    renderer: EmailTemplateRenderer,
    settings: Settings,
) -> str | None:
    message = renderer.render(
        template_key="notification",
        settings=settings,
        context={
            "subject": subject or default_subject(notification_type),
            "title": TITLES.get(notification_type, GENERIC_TITLE),
            "icon": ICONS.get(notification_type, GENERIC_ICON),
            "message": body,
        },
    )
    message.to = [target]
    message.tags["notification_type"] = notification_type
    try:
        email_id = await email_service.send(message)
    except NotificationDeliveryError as exc:
        logger.error("Email %s to %s failed: %s", notification_type, target, exc.message)
        await _record(
            uow,
            account_id,
            notification_type,
            NotificationChannel.EMAIL,
            target,
            body,
            DeliveryStatus.FAILED,
            error_message=serialize_provider_error(exc),
        )
        raise
    await _record(
        uow,
        account_id,
        notification_type,
        NotificationChannel.EMAIL,
        target,
        body,
        DeliveryStatus.SENT,
        provider_message_id=email_id,
    )
    return email_id


async def deliver_whatsapp(
    uow: UnitOfWork,
    account_id: UUID,
    *,
    target: str,
    notification_type: str,
    body: str,
    sender: WhatsAppSender,
) -> str | None:
    try:
        sid = await sender.send(WhatsAppMessage(to=target, body=body))
    except NotificationDeliveryError as exc:
        logger.error("WhatsApp %s to %s failed: %s", notification_type, target, exc.message)
        await _record(
            uow,
            account_id,
            notification_type,
            NotificationChannel.WHATSAPP,
            target,
            body,
            DeliveryStatus.FAILED,
            error_message=serialize_provider_error(exc),
        )
        raise
    await _record(
        uow,
        account_id,
        notification_type,
        NotificationChannel.WHATSAPP,
        target,
        body,
        DeliveryStatus.SENT,
        provider_message_id=sid,
    )
    return sid
