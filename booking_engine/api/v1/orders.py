from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from booking_engine.api.staff_auth import StaffContext, require_staff
from booking_engine.api.v1.results import unwrap
from booking_engine.api.v1.schemas import OrderCreateSchema, OrderSchema, OrderStatusSchema, OrderUpdateSchema
from booking_engine.application.dto.drafts import OrderDraft
from booking_engine.application.use_cases.orders import OrderUseCase
from booking_engine.wiring.dependencies import get_order_use_case

router = APIRouter(prefix="/orders")


@router.post("", response_model=OrderSchema, status_code=201)
def create_order(
    req: OrderCreateSchema,
    staff: StaffContext = Depends(require_staff),
    uc: OrderUseCase = Depends(get_order_use_case),
):
    draft = OrderDraft(
        client_name=req.client_name,
        client_phone=req.client_phone,
        total_amount=req.total_amount,
        dp_amount=req.dp_amount,
        payment_status=req.payment_status,
        items=tuple(req.items),
        note=req.note,
    )
    return OrderSchema.model_validate(unwrap(uc.create_order(draft, staff=staff.name)))


@router.get("", response_model=list[OrderSchema])
def list_orders(
    staff: StaffContext = Depends(require_staff),
    uc: OrderUseCase = Depends(get_order_use_case),
):
    return [OrderSchema.model_validate(o) for o in unwrap(uc.list_orders())]


@router.get("/{order_id}", response_model=OrderSchema)
def get_order(
    order_id: str,
    staff: StaffContext = Depends(require_staff),
    uc: OrderUseCase = Depends(get_order_use_case),
):
    return OrderSchema.model_validate(unwrap(uc.get_order(order_id)))


@router.patch("/{order_id}", response_model=OrderSchema)
def update_order(
    order_id: str,
    req: OrderUpdateSchema,
    staff: StaffContext = Depends(require_staff),
    uc: OrderUseCase = Depends(get_order_use_case),
):
    changes = req.model_dump(mode="json", exclude_unset=True)
    return OrderSchema.model_validate(unwrap(uc.update_order(order_id, changes, staff=staff.name)))


@router.put("/{order_id}/payment-status", response_model=OrderSchema)
def set_payment_status(
    order_id: str,
    req: OrderStatusSchema,
    staff: StaffContext = Depends(require_staff),
    uc: OrderUseCase = Depends(get_order_use_case),
):
    return OrderSchema.model_validate(unwrap(uc.set_payment_status(order_id, req.payment_status, staff=staff.name)))


@router.delete("/{order_id}", status_code=204)
def delete_order(
    order_id: str,
    staff: StaffContext = Depends(require_staff),
    uc: OrderUseCase = Depends(get_order_use_case),
) -> Response:
    unwrap(uc.delete_order(order_id, staff=staff.name))
    return Response(status_code=204)
