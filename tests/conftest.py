from __future__ import annotations

import pytest

from booking_engine.application.use_cases.audit_trail import AuditTrailUseCase
from booking_engine.application.use_cases.availability import CalendarAvailabilityUseCase
from booking_engine.application.use_cases.bookings import BookingUseCase
from booking_engine.application.use_cases.invoice import InvoiceUseCase
from booking_engine.application.use_cases.orders import OrderUseCase
from booking_engine.application.use_cases.payments import PaymentLedgerUseCase
from booking_engine.application.use_cases.transactions import TransactionReportUseCase
from booking_engine.application.utils.documents import PACKAGES
from booking_engine.infrastructure.catalog.package_catalog_store import StorePackageCatalog
from booking_engine.infrastructure.notify.mock_notifier import MockBookingNotifier
from booking_engine.infrastructure.store.memory_store import MemoryDocumentStore

from tests.helpers import TZ


@pytest.fixture
def store() -> MemoryDocumentStore:
    store = MemoryDocumentStore()
    store.insert(PACKAGES, {"name": "Bridal Signature", "price": 5_000_000}, doc_id="pkg_bridal")
    store.insert(PACKAGES, {"name": "Engagement Glam", "price": 2_500_000}, doc_id="pkg_engagement")
    return store


@pytest.fixture
def catalog(store) -> StorePackageCatalog:
    return StorePackageCatalog(store)


@pytest.fixture
def notifier() -> MockBookingNotifier:
    return MockBookingNotifier()


@pytest.fixture
def availability(store) -> CalendarAvailabilityUseCase:
    return CalendarAvailabilityUseCase(store=store, timezone=TZ, daily_capacity=6, advertised_daily_limit=4)


@pytest.fixture
def bookings(store, catalog, notifier, availability) -> BookingUseCase:
    return BookingUseCase(store=store, catalog=catalog, notifier=notifier, availability=availability, timezone=TZ)


@pytest.fixture
def payments(store, catalog) -> PaymentLedgerUseCase:
    return PaymentLedgerUseCase(store=store, catalog=catalog, timezone=TZ)


@pytest.fixture
def audit(store) -> AuditTrailUseCase:
    return AuditTrailUseCase(store=store, timezone=TZ)


@pytest.fixture
def invoices(store, catalog) -> InvoiceUseCase:
    return InvoiceUseCase(store=store, catalog=catalog, default_service_label="Makeup Service")


@pytest.fixture
def orders(store) -> OrderUseCase:
    return OrderUseCase(store=store, timezone=TZ)


@pytest.fixture
def reports(store, catalog) -> TransactionReportUseCase:
    return TransactionReportUseCase(store=store, catalog=catalog, default_service_label="Makeup Service")
