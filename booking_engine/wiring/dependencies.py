from functools import lru_cache
import logging

from booking_engine.core.config import settings
from booking_engine.application.ports.booking_notifier import BookingNotifierPort
from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.application.ports.package_catalog import PackageCatalogPort
from booking_engine.application.use_cases.audit_trail import AuditTrailUseCase
from booking_engine.application.use_cases.availability import CalendarAvailabilityUseCase
from booking_engine.application.use_cases.bookings import BookingUseCase
from booking_engine.application.use_cases.invoice import InvoiceUseCase
from booking_engine.application.use_cases.orders import OrderUseCase
from booking_engine.application.use_cases.payments import PaymentLedgerUseCase
from booking_engine.application.use_cases.transactions import TransactionReportUseCase
from booking_engine.application.utils.date_parser import safe_timezone
from booking_engine.infrastructure.catalog.package_catalog_store import StorePackageCatalog
from booking_engine.infrastructure.notify.mock_notifier import MockBookingNotifier
from booking_engine.infrastructure.notify.webhook_client import WebhookClient
from booking_engine.infrastructure.notify.webhook_notifier import WebhookBookingNotifier
from booking_engine.infrastructure.store.json_store import JsonDocumentStore
from booking_engine.infrastructure.store.memory_store import MemoryDocumentStore


_document_store: DocumentStorePort | None = None


def get_document_store() -> DocumentStorePort:
    global _document_store
    if _document_store is None:
        if settings.STORE_PROVIDER.lower() == "json":
            _document_store = JsonDocumentStore(data_dir=settings.DATA_DIR)
        else:
            _document_store = MemoryDocumentStore()
    return _document_store


def get_timezone():
    return safe_timezone(settings.BUSINESS_TIMEZONE)


def get_package_catalog() -> PackageCatalogPort:
    return StorePackageCatalog(store=get_document_store())


@lru_cache
def get_notifier() -> BookingNotifierPort:
    logger = logging.getLogger(__name__)
    if not settings.NOTIFY_ENABLED or not settings.NOTIFY_WEBHOOK_URL:
        logger.info("Using MockBookingNotifier (NOTIFY_ENABLED=%s)", settings.NOTIFY_ENABLED)
        return MockBookingNotifier()

    logger.info("Using WebhookBookingNotifier")
    client = WebhookClient(
        url=settings.NOTIFY_WEBHOOK_URL,
        timeout=settings.NOTIFY_TIMEOUT_SECONDS,
        token=settings.NOTIFY_WEBHOOK_TOKEN,
    )
    return WebhookBookingNotifier(client=client)


def get_availability_use_case() -> CalendarAvailabilityUseCase:
    return CalendarAvailabilityUseCase(
        store=get_document_store(),
        timezone=get_timezone(),
        daily_capacity=settings.DAILY_CAPACITY,
        advertised_daily_limit=settings.ADVERTISED_DAILY_LIMIT,
    )


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        store=get_document_store(),
        catalog=get_package_catalog(),
        notifier=get_notifier(),
        availability=get_availability_use_case(),
        timezone=get_timezone(),
    )


def get_payment_use_case() -> PaymentLedgerUseCase:
    return PaymentLedgerUseCase(
        store=get_document_store(),
        catalog=get_package_catalog(),
        timezone=get_timezone(),
    )


def get_audit_trail_use_case() -> AuditTrailUseCase:
    return AuditTrailUseCase(store=get_document_store(), timezone=get_timezone())


def get_invoice_use_case() -> InvoiceUseCase:
    return InvoiceUseCase(
        store=get_document_store(),
        catalog=get_package_catalog(),
        default_service_label=settings.DEFAULT_SERVICE_LABEL,
    )


def get_order_use_case() -> OrderUseCase:
    return OrderUseCase(store=get_document_store(), timezone=get_timezone())


def get_transaction_report_use_case() -> TransactionReportUseCase:
    return TransactionReportUseCase(
        store=get_document_store(),
        catalog=get_package_catalog(),
        default_service_label=settings.DEFAULT_SERVICE_LABEL,
    )
