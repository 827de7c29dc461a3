from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Response

from booking_engine.api.staff_auth import StaffContext, require_staff
from booking_engine.api.v1.results import unwrap
from booking_engine.api.v1.schemas import (
    BookingSchema,
    BookingUpdateSchema,
    InvoiceSchema,
    PaymentCreateSchema,
    PaymentSchema,
    PaymentSummarySchema,
    PublicBookingRequestSchema,
    StaffBookingRequestSchema,
    StatusUpdateSchema,
)
from booking_engine.application.dto.drafts import BookingDraft
from booking_engine.application.use_cases.bookings import BookingUseCase
from booking_engine.application.use_cases.invoice import InvoiceUseCase
from booking_engine.application.use_cases.payments import PaymentLedgerUseCase
from booking_engine.domain.entities.booking import BookingStatus
from booking_engine.wiring.dependencies import (
    get_booking_use_case,
    get_invoice_use_case,
    get_payment_use_case,
)

router = APIRouter(prefix="/bookings")


def _draft(req: StaffBookingRequestSchema | PublicBookingRequestSchema) -> BookingDraft:
    data = req.model_dump(mode="json", exclude={"language"})
    return BookingDraft(**data)


@router.post("", response_model=BookingSchema, status_code=201)
def submit_booking(
    req: PublicBookingRequestSchema,
    background_tasks: BackgroundTasks,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    booking = unwrap(uc.submit_public_booking(_draft(req), language=req.language.value, notify=False))
    background_tasks.add_task(uc.notify_new_booking, booking, req.language.value)
    return BookingSchema.model_validate(booking)


@router.post("/staff", response_model=BookingSchema, status_code=201)
def create_staff_booking(
    req: StaffBookingRequestSchema,
    staff: StaffContext = Depends(require_staff),
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    booking = unwrap(uc.create_staff_booking(_draft(req), staff=staff.name))
    return BookingSchema.model_validate(booking)


@router.get("", response_model=list[BookingSchema])
def list_bookings(
    status: BookingStatus | None = Query(None),
    staff: StaffContext = Depends(require_staff),
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    return [BookingSchema.model_validate(b) for b in unwrap(uc.list_bookings(status))]


@router.get("/{booking_id}", response_model=BookingSchema)
def get_booking(
    booking_id: str,
    staff: StaffContext = Depends(require_staff),
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    return BookingSchema.model_validate(unwrap(uc.get_booking(booking_id)))


@router.patch("/{booking_id}", response_model=BookingSchema)
def update_booking(
    booking_id: str,
    req: BookingUpdateSchema,
    staff: StaffContext = Depends(require_staff),
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    changes = req.model_dump(mode="json", exclude_unset=True)
    return BookingSchema.model_validate(unwrap(uc.update_details(booking_id, changes, staff=staff.name)))


@router.put("/{booking_id}/status", response_model=BookingSchema)
def update_status(
    booking_id: str,
    req: StatusUpdateSchema,
    staff: StaffContext = Depends(require_staff),
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    return BookingSchema.model_validate(unwrap(uc.update_status(booking_id, req.status, staff=staff.name)))


@router.delete("/{booking_id}", status_code=204)
def delete_booking(
    booking_id: str,
    staff: StaffContext = Depends(require_staff),
    uc: BookingUseCase = Depends(get_booking_use_case),
) -> Response:
    unwrap(uc.delete_booking(booking_id, staff=staff.name))
    return Response(status_code=204)


@router.post("/{booking_id}/payments", response_model=PaymentSchema, status_code=201)
def add_payment(
    booking_id: str,
    req: PaymentCreateSchema,
    staff: StaffContext = Depends(require_staff),
    uc: PaymentLedgerUseCase = Depends(get_payment_use_case),
):
    payment = unwrap(
        uc.add_payment(
            booking_id,
            amount=req.amount,
            payment_type=req.type,
            method=req.method,
            note=req.note,
            staff=staff.name,
        )
    )
    return PaymentSchema.model_validate(payment)


@router.delete("/{booking_id}/payments/{payment_id}", status_code=204)
def remove_payment(
    booking_id: str,
    payment_id: str,
    staff: StaffContext = Depends(require_staff),
    uc: PaymentLedgerUseCase = Depends(get_payment_use_case),
) -> Response:
    unwrap(uc.remove_payment(booking_id, payment_id, staff=staff.name))
    return Response(status_code=204)


@router.get("/{booking_id}/payment-summary", response_model=PaymentSummarySchema)
def payment_summary(
    booking_id: str,
    staff: StaffContext = Depends(require_staff),
    uc: PaymentLedgerUseCase = Depends(get_payment_use_case),
):
    return PaymentSummarySchema.model_validate(unwrap(uc.payment_summary(booking_id)))


@router.get("/{booking_id}/invoice", response_model=InvoiceSchema)
def get_invoice(
    booking_id: str,
    staff: StaffContext = Depends(require_staff),
    uc: InvoiceUseCase = Depends(get_invoice_use_case),
):
    return InvoiceSchema.model_validate(unwrap(uc.build_invoice(booking_id)))
