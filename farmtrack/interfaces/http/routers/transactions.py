from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from farmtrack.application.use_cases.finance import (
    create_transaction,
    delete_transaction,
    list_transactions,
    summary,
)
from farmtrack.domain.models.transaction import EXPENSE_CATEGORIES, INCOME_CATEGORIES
from farmtrack.infrastructure.auth.context import AuthContext
from farmtrack.interfaces.http.deps import get_auth_context, get_today, get_uow
from farmtrack.interfaces.http.schemas.transactions import (
    CategoriesResponse,
    CategoryOption,
    FinanceSummaryResponse,
    MonthlyFinanceResponse,
    TransactionCreate,
    TransactionResponse,
)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories(
    context: AuthContext = Depends(get_auth_context),
) -> CategoriesResponse:
    return CategoriesResponse(
        income=[CategoryOption(value=k, label=v) for k, v in INCOME_CATEGORIES.items()],
        expense=[CategoryOption(value=k, label=v) for k, v in EXPENSE_CATEGORIES.items()],
    )


@router.get("/summary", response_model=FinanceSummaryResponse)
async def finance_summary(
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    months: int = Query(6, ge=1, le=24),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: DtDate = Depends(get_today),
) -> FinanceSummaryResponse:
    overview = await summary.execute(
        uow, context.account_id, today, date_from=date_from, date_to=date_to, months=months
    )
    data = overview.summary
    return FinanceSummaryResponse(
        total_income=data.total_income,
        total_expense=data.total_expense,
        balance=data.balance,
        income_by_category=data.income_by_category,
        expense_by_category=data.expense_by_category,
        monthly=[MonthlyFinanceResponse.model_validate(m) for m in overview.monthly],
    )


@router.get("", response_model=list[TransactionResponse])
async def list_transactions_endpoint(
    type_filter: str | None = Query(None, alias="type"),
    category: str | None = Query(None),
    animal_id: UUID | None = Query(None),
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[TransactionResponse]:
    items = await list_transactions.execute(
        uow,
        context.account_id,
        type=type_filter,
        category=category,
        animal_id=animal_id,
        date_from=date_from,
        date_to=date_to,
    )
    return [TransactionResponse.model_validate(item) for item in items]


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction_endpoint(
    payload: TransactionCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> TransactionResponse:
    transaction = await create_transaction.execute(
        uow,
        context.account_id,
        create_transaction.CreateTransactionInput(**payload.model_dump()),
    )
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction_endpoint(
    transaction_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await delete_transaction.execute(uow, context.account_id, transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
