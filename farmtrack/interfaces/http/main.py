from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from farmtrack.config.settings import Settings, get_settings
from farmtrack.infrastructure.auth.jwt_service import JWTService
from farmtrack.infrastructure.db.session import create_engine, create_session_factory
from farmtrack.infrastructure.email.factory import build_email_service
from farmtrack.infrastructure.email.models import EmailService
from farmtrack.infrastructure.email.renderer.engine import EmailTemplateRenderer
from farmtrack.infrastructure.reports.pdf_generator import PDFGenerator
from farmtrack.infrastructure.reports.report_service import ReportService
from farmtrack.infrastructure.whatsapp.factory import build_whatsapp_sender
from farmtrack.infrastructure.whatsapp.models import WhatsAppSender
from farmtrack.interfaces.http.deps import get_app_settings
from farmtrack.interfaces.http.routers import (
    animals,
    breeding,
    dashboard,
    health_records,
    milk_productions,
    notifications,
    profile,
    reports,
    transactions,
    vaccinations,
)
from farmtrack.interfaces.http.routers import settings as settings_router
from farmtrack.interfaces.middleware.auth_middleware import AuthMiddleware
from farmtrack.interfaces.middleware.error_handler import register_error_handlers

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
# Libraries whose INFO output is noise unless we are debugging
CHATTY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore")

ROUTERS = (
    animals.router,
    vaccinations.router,
    breeding.router,
    milk_productions.router,
    transactions.router,
    health_records.router,
    settings_router.router,
    profile.router,
    dashboard.router,
    reports.router,
    notifications.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.engine.dispose()


def configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    root = logging.getLogger()
    # uvicorn --reload imports the app again; keep a single handler
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)


def _attach_services(
    app: FastAPI,
    settings: Settings,
    *,
    jwt_service: JWTService | None,
    email_service: EmailService | None,
    whatsapp_sender: WhatsAppSender | None,
) -> None:
    state = app.state
    state.settings = settings
    state.engine = create_engine(settings.database_url)
    state.session_factory = create_session_factory(state.engine)
    state.jwt_service = jwt_service or JWTService.from_settings(settings)
    state.email_service = email_service or build_email_service(settings)
    state.email_renderer = EmailTemplateRenderer.create_default()
    state.whatsapp_sender = whatsapp_sender or build_whatsapp_sender(settings)
    state.report_service = ReportService(PDFGenerator())


def create_app(
    *,
    settings: Settings | None = None,
    jwt_service: JWTService | None = None,
    email_service: EmailService | None = None,
    whatsapp_sender: WhatsAppSender | None = None,
) -> FastAPI:
    """Build the API. Gateways can be injected; otherwise they come from settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title="FarmTrack Backend",
        version="0.1.0",
        description="Herd, breeding, milk and finance records for small livestock farms",
        lifespan=lifespan,
    )
    _attach_services(
        app,
        settings,
        jwt_service=jwt_service,
        email_service=email_service,
        whatsapp_sender=whatsapp_sender,
    )
    register_error_handlers(app)

    api = APIRouter(prefix="/api/v1")
    for router in ROUTERS:
        api.include_router(router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api)

    # Middleware added last runs first: CORS must see preflight requests before auth
    app.add_middleware(AuthMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
