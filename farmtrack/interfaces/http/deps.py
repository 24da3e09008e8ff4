from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date

from fastapi import Depends, Request

from farmtrack.application.errors import AuthError
from farmtrack.config.settings import Settings, get_settings
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.infrastructure.db.session import SQLAlchemyUnitOfWork
from farmtrack.infrastructure.email.models import EmailService
from farmtrack.infrastructure.email.renderer.engine import EmailTemplateRenderer
from farmtrack.infrastructure.reports.report_service import ReportService
from farmtrack.infrastructure.whatsapp.models import WhatsAppSender
from farmtrack.utils.datetime_tz import local_today


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_today(settings: Settings = Depends(get_app_settings)) -> date:
    """Farm-local calendar date for the request."""
    return local_today(settings.timezone)


def _state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not configured")
    return value


def get_email_service(request: Request) -> EmailService:
    return _state(request, "email_service")


def get_email_renderer(request: Request) -> EmailTemplateRenderer:
    return _state(request, "email_renderer")


def get_whatsapp_sender(request: Request) -> WhatsAppSender:
    return _state(request, "whatsapp_sender")


def get_report_service(request: Request) -> ReportService:
    return _state(request, "report_service")
