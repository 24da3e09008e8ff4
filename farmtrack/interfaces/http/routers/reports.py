from __future__ import annotations

from datetime import date as DtDate

from fastapi import APIRouter, Depends, Query, Response

from farmtrack.application.use_cases.dashboard import report_data
from farmtrack.config.settings import Settings
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.infrastructure.reports.report_service import ReportService
from farmtrack.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_report_service,
    get_today,
    get_uow,
)
from farmtrack.interfaces.http.schemas.dashboard import ActivityReportResponse

router = APIRouter(prefix="/reports", tags=["reports"])


def _pdf_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/overview", response_model=ActivityReportResponse)
async def activity_overview(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
) -> ActivityReportResponse:
    report = await report_data.overview(uow, context.account_id, today)
    return ActivityReportResponse.model_validate(report)


@router.get("/milk.pdf")
async def milk_report_pdf(
    month: DtDate | None = Query(None, description="Any day inside the reported month"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
    report_service: ReportService = Depends(get_report_service),
) -> Response:
    data = await report_data.milk_report(
        uow, context.account_id, month or today, settings.default_milk_price_per_liter
    )
    content = report_service.build_milk_report(data)
    return _pdf_response(content, f"milk-report-{data.month:%Y-%m}.pdf")


@router.get("/health-expenses.pdf")
async def health_expenses_pdf(
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    report_service: ReportService = Depends(get_report_service),
) -> Response:
    data = await report_data.health_expense_report(
        uow, context.account_id, date_from=date_from, date_to=date_to
    )
    content = report_service.build_health_expense_report(data)
    return _pdf_response(content, "health-expenses-report.pdf")


@router.get("/full.pdf")
async def full_report_pdf(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
    settings: Settings = Depends(get_app_settings),
    report_service: ReportService = Depends(get_report_service),
) -> Response:
    data = await report_data.full_report(
        uow, context.account_id, today, settings.default_milk_price_per_liter
    )
    content = report_service.build_full_report(data)
    return _pdf_response(content, f"farm-report-{today.isoformat()}.pdf")
