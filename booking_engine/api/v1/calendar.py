from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from booking_engine.api.staff_auth import StaffContext, require_staff
from booking_engine.api.v1.results import unwrap
from booking_engine.api.v1.schemas import (
    BookingSchema,
    CalendarDaySchema,
    CapacityPolicySchema,
    Language,
    MonthViewSchema,
    PackageSchema,
)
from booking_engine.application.dto.result import OperationResult
from booking_engine.application.exceptions import BookingEngineError
from booking_engine.application.ports.package_catalog import PackageCatalogPort
from booking_engine.application.use_cases.availability import CalendarAvailabilityUseCase
from booking_engine.domain.entities.service_package import ServicePackage
from booking_engine.wiring.dependencies import get_availability_use_case, get_package_catalog

router = APIRouter()


@router.get("/calendar/policy", response_model=CapacityPolicySchema)
def capacity_policy(uc: CalendarAvailabilityUseCase = Depends(get_availability_use_case)):
    return CapacityPolicySchema(
        daily_capacity=uc.daily_capacity,
        advertised_daily_limit=uc.advertised_daily_limit,
    )


@router.get("/calendar/dates/{date_iso}", response_model=CalendarDaySchema)
def classify_date(date_iso: str, uc: CalendarAvailabilityUseCase = Depends(get_availability_use_case)):
    return CalendarDaySchema.model_validate(unwrap(uc.classify(date_iso)))


@router.get("/calendar/dates/{date_iso}/bookings", response_model=list[BookingSchema])
def bookings_on_date(
    date_iso: str,
    staff: StaffContext = Depends(require_staff),
    uc: CalendarAvailabilityUseCase = Depends(get_availability_use_case),
):
    return [BookingSchema.model_validate(b) for b in unwrap(uc.bookings_on_date(date_iso))]


@router.get("/calendar/{year}/{month}", response_model=MonthViewSchema)
def month_view(
    year: int,
    month: int,
    lang: Language = Query(Language.id),
    uc: CalendarAvailabilityUseCase = Depends(get_availability_use_case),
):
    return MonthViewSchema.model_validate(unwrap(uc.month_view(year, month, lang.value)))


def _packages(catalog: PackageCatalogPort) -> OperationResult[list[ServicePackage]]:
    try:
        return OperationResult.success(catalog.list_packages())
    except BookingEngineError as e:
        return OperationResult.from_error(e)


@router.get("/packages", response_model=list[PackageSchema])
def list_packages(catalog: PackageCatalogPort = Depends(get_package_catalog)):
    return [PackageSchema.model_validate(p) for p in unwrap(_packages(catalog))]
