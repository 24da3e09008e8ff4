from __future__ import annotations

import hmac
import logging
from datetime import date

from fastapi import APIRouter, Depends, Header, Query
from fastapi.responses import JSONResponse

from farmtrack.application.errors import AuthError, NotificationDeliveryError
from farmtrack.application.use_cases.notifications import (
    daily_summary,
    list_logs,
    send_email,
    send_whatsapp,
)
from farmtrack.application.use_cases.notifications.dispatch import DispatchResult
from farmtrack.config.settings import Settings
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.infrastructure.email.models import EmailService
from farmtrack.infrastructure.email.renderer.engine import EmailTemplateRenderer
from farmtrack.infrastructure.whatsapp.models import WhatsAppSender
from farmtrack.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_email_renderer,
    get_email_service,
    get_today,
    get_uow,
    get_whatsapp_sender,
)
from farmtrack.interfaces.http.schemas.notifications import (
    DailySummaryItem,
    DailySummaryResponse,
    NotificationLogResponse,
    NotificationResult,
    SendEmailRequest,
    SendWhatsAppRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _result(result: DispatchResult) -> NotificationResult:
    return NotificationResult(
        success=result.success,
        message=result.message,
        email_id=result.email_id,
        message_sid=result.message_sid,
    )


def _delivery_failed(exc: NotificationDeliveryError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message},
    )


def _check_cron_secret(settings: Settings, provided: str | None) -> None:
    expected = settings.cron_secret_key
    if expected is None:
        raise AuthError("Scheduled notifications are not configured")
    if not provided or not hmac.compare_digest(provided, expected.get_secret_value()):
        raise AuthError("Invalid cron secret")


@router.post("/email", response_model=NotificationResult, response_model_exclude_none=True)
async def send_email_notification(
    payload: SendEmailRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    email_service: EmailService = Depends(get_email_service),
    renderer: EmailTemplateRenderer = Depends(get_email_renderer),
):
    context.require_account(payload.user_id)
    try:
        result = await send_email.execute(
            uow,
            context.account_id,
            send_email.SendEmailInput(
                notification_type=payload.notification_type,
                message=payload.message,
                email=payload.email,
                subject=payload.subject,
            ),
            email_service=email_service,
            renderer=renderer,
            settings=settings,
        )
    except NotificationDeliveryError as exc:
        return _delivery_failed(exc)
    return _result(result)


@router.post("/whatsapp", response_model=NotificationResult, response_model_exclude_none=True)
async def send_whatsapp_notification(
    payload: SendWhatsAppRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    sender: WhatsAppSender = Depends(get_whatsapp_sender),
):
    context.require_account(payload.user_id)
    try:
        result = await send_whatsapp.execute(
            uow,
            context.account_id,
            send_whatsapp.SendWhatsAppInput(
                notification_type=payload.notification_type,
                message=payload.message,
                phone_number=payload.phone_number,
            ),
            sender=sender,
            default_country_code=settings.whatsapp_default_country_code,
        )
    except NotificationDeliveryError as exc:
        return _delivery_failed(exc)
    return _result(result)


@router.post("/daily", response_model=DailySummaryResponse)
async def run_daily_summary(
    x_cron_secret: str | None = Header(None, alias="X-Cron-Secret"),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
    email_service: EmailService = Depends(get_email_service),
    renderer: EmailTemplateRenderer = Depends(get_email_renderer),
) -> DailySummaryResponse:
    _check_cron_secret(settings, x_cron_secret)
    result = await daily_summary.execute(
        uow, today, email_service=email_service, renderer=renderer, settings=settings
    )
    return DailySummaryResponse(
        success=True,
        sent=result.sent,
        total_users=result.total_users,
        results=[DailySummaryItem.model_validate(r) for r in result.results],
    )


@router.get("/logs", response_model=list[NotificationLogResponse])
async def list_notification_logs(
    channel: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    limit: int = Query(50, ge=1, le=200),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[NotificationLogResponse]:
    logs = await list_logs.execute(
        uow, context.account_id, channel=channel, status=status_filter, limit=limit
    )
    return [NotificationLogResponse.model_validate(entry) for entry in logs]
