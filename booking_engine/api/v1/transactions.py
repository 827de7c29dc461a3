from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from booking_engine.api.staff_auth import StaffContext, require_staff
from booking_engine.api.v1.results import unwrap
from booking_engine.api.v1.schemas import TransactionKindSchema, TransactionSchema, TransactionSummarySchema
from booking_engine.application.use_cases.transactions import TransactionKind, TransactionReportUseCase
from booking_engine.domain.entities.payment import PaymentStatus
from booking_engine.wiring.dependencies import get_transaction_report_use_case

router = APIRouter(prefix="/transactions")


@router.get("", response_model=list[TransactionSchema])
def list_transactions(
    kind: TransactionKindSchema = Query(TransactionKindSchema.all),
    status: PaymentStatus | None = Query(None),
    search: str | None = Query(None),
    staff: StaffContext = Depends(require_staff),
    uc: TransactionReportUseCase = Depends(get_transaction_report_use_case),
):
    items = unwrap(uc.list_transactions(TransactionKind(kind.value), status, search))
    return [TransactionSchema.model_validate(t) for t in items]


@router.get("/summary", response_model=TransactionSummarySchema)
def transaction_summary(
    staff: StaffContext = Depends(require_staff),
    uc: TransactionReportUseCase = Depends(get_transaction_report_use_case),
):
    return TransactionSummarySchema.model_validate(unwrap(uc.summary()))
