from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, computed_field

from booking_engine.domain.entities.booking import BookingStatus, HennaProvider
from booking_engine.domain.entities.calendar_day import DateStatus
from booking_engine.domain.entities.payment import PaymentStatus, PaymentType


class Language(str, Enum):
    id = "id"
    en = "en"


class TransactionKindSchema(str, Enum):
    all = "all"
    orders = "orders"
    bookings = "bookings"


# Requests

class BookingCreateSchema(BaseModel):
    client_name: str
    client_phone: str
    date: str
    time: str = "10:00"
    address: str | None = None
    social_media: str | None = None
    event_date: str | None = None
    ceremony_time: str | None = None
    henna_by: HennaProvider | None = None
    selected_package: str | None = None
    request_note: str | None = None


class PublicBookingRequestSchema(BookingCreateSchema):
    language: Language = Language.id


class StaffBookingRequestSchema(BookingCreateSchema):
    package_price: int | None = None


class BookingUpdateSchema(BaseModel):
    client_name: str | None = None
    client_phone: str | None = None
    address: str | None = None
    social_media: str | None = None
    date: str | None = None
    time: str | None = None
    event_date: str | None = None
    ceremony_time: str | None = None
    henna_by: HennaProvider | None = None
    selected_package: str | None = None
    package_price: int | None = None
    request_note: str | None = None


class StatusUpdateSchema(BaseModel):
    status: BookingStatus


class PaymentCreateSchema(BaseModel):
    amount: int
    type: PaymentType
    method: str | None = None
    note: str | None = None


class NoteCreateSchema(BaseModel):
    body: str


class NoteEditSchema(BaseModel):
    body: str
    id: str | None = None
    author: str | None = None
    timestamp: str | None = None


class NotesReplaceSchema(BaseModel):
    entries: list[NoteEditSchema] = Field(default_factory=list)


class OrderCreateSchema(BaseModel):
    client_name: str
    client_phone: str = ""
    total_amount: int
    dp_amount: int = 0
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    items: list[str] = Field(default_factory=list)
    note: str | None = None


class OrderUpdateSchema(BaseModel):
    client_name: str | None = None
    client_phone: str | None = None
    total_amount: int | None = None
    dp_amount: int | None = None
    payment_status: PaymentStatus | None = None
    items: list[str] | None = None


class OrderStatusSchema(BaseModel):
    payment_status: PaymentStatus


# Responses

class PaymentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: int
    type: PaymentType
    method: str | None = None
    note: str | None = None
    created_at: str


class NoteSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    timestamp: str
    author: str
    body: str


class NotesTextSchema(BaseModel):
    text: str


class BookingSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_name: str
    client_phone: str
    address: str | None = None
    social_media: str | None = None
    date: str
    time: str
    event_date: str | None = None
    ceremony_time: str | None = None
    henna_by: HennaProvider | None = None
    selected_package: str | None = None
    package_price: int | None = None
    request_note: str | None = None
    status: BookingStatus
    payments: list[PaymentSchema] = Field(default_factory=list)
    notes: list[NoteSchema] = Field(default_factory=list)
    last_updated_by: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @computed_field
    @property
    def total_paid(self) -> int:
        return sum(p.amount for p in self.payments)


class PaymentSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    price: int
    total_paid: int
    remaining_balance: int
    status: PaymentStatus


class CalendarDaySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: str
    status: DateStatus
    booking_count: int
    is_past: bool
    selectable: bool


class MonthViewSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    year: int
    month: int
    month_name: str
    weekday_labels: list[str]
    leading_blanks: int
    days: list[CalendarDaySchema]
    previous_month: tuple[int, int]
    next_month: tuple[int, int]


class CapacityPolicySchema(BaseModel):
    daily_capacity: int
    advertised_daily_limit: int


class PackageSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: int


class InvoiceSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    invoice_number: str
    booking_id: str
    client_name: str
    client_phone: str
    address: str | None = None
    booking_date: str
    booking_time: str
    event_date: str | None = None
    ceremony_time: str | None = None
    booking_status: BookingStatus
    service_name: str
    price: int
    total_paid: int
    remaining_balance: int
    payments: list[PaymentSchema]
    payment_status: PaymentStatus


class OrderSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_name: str
    client_phone: str
    total_amount: int
    dp_amount: int
    payment_status: PaymentStatus
    items: list[str]
    notes: list[NoteSchema] = Field(default_factory=list)
    last_updated_by: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class TransactionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: str
    id: str
    client_name: str
    client_phone: str
    total_amount: int
    paid_amount: int
    payment_status: PaymentStatus
    date: str
    items: list[str]
    last_updated_by: str | None = None


class TransactionSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_revenue: int
    total_paid: int
    total_outstanding: int
    order_count: int
    booking_count: int
