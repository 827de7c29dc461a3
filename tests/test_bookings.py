from __future__ import annotations

from booking_engine.application.dto.result import ErrorKind
from booking_engine.application.use_cases.availability import CalendarAvailabilityUseCase
from booking_engine.application.use_cases.bookings import BookingUseCase
from booking_engine.domain.entities.booking import BookingStatus

from tests.helpers import TODAY, TZ, FailingNotifier, make_draft


def test_public_submission_creates_pending_and_notifies_once(bookings, notifier):
    result = bookings.submit_public_booking(make_draft(selected_package="pkg_bridal"), language="en", today=TODAY)

    assert result.ok
    booking = result.value
    assert booking.id
    assert booking.status == BookingStatus.PENDING
    assert booking.package_price is None
    assert booking.created_at is not None
    assert notifier.sent == [(booking.id, "en")]


def test_public_submission_survives_notifier_failure(store, catalog, availability):
    failing = FailingNotifier()
    uc = BookingUseCase(store=store, catalog=catalog, notifier=failing, availability=availability, timezone=TZ)

    result = uc.submit_public_booking(make_draft(), today=TODAY)

    assert result.ok
    assert failing.calls == 1
    assert uc.get_booking(result.value.id).ok


def test_public_submission_without_notify_skips_notifier(bookings, notifier):
    assert bookings.submit_public_booking(make_draft(), today=TODAY, notify=False).ok
    assert notifier.sent == []


def test_public_submission_rejects_past_date(bookings, notifier):
    result = bookings.submit_public_booking(make_draft(date="2025-02-27"), today=TODAY)

    assert not result.ok
    assert result.error == ErrorKind.INVALID_INPUT
    assert "past" in result.message
    assert notifier.sent == []


def test_public_submission_rejects_full_date(store, catalog, notifier):
    availability = CalendarAvailabilityUseCase(store=store, timezone=TZ, daily_capacity=2)
    uc = BookingUseCase(store=store, catalog=catalog, notifier=notifier, availability=availability, timezone=TZ)

    assert uc.submit_public_booking(make_draft(), today=TODAY).ok
    assert uc.submit_public_booking(make_draft(), today=TODAY).ok
    third = uc.submit_public_booking(make_draft(), today=TODAY)

    assert not third.ok
    assert third.error == ErrorKind.INVALID_INPUT
    assert "fully booked" in third.message


def test_compact_date_is_stored_canonically_and_counted(bookings, availability):
    result = bookings.submit_public_booking(make_draft(date="20250310", event_date="20250311"), today=TODAY)

    assert result.ok
    assert result.value.date == "2025-03-10"
    assert result.value.event_date == "2025-03-11"
    day = availability.classify("2025-03-10", today=TODAY).value
    assert day.booking_count == 1
    assert [b.id for b in availability.bookings_on_date("2025-03-10").value] == [result.value.id]


def test_compact_date_cannot_overbook_full_day(store, catalog, notifier):
    availability = CalendarAvailabilityUseCase(store=store, timezone=TZ, daily_capacity=2)
    uc = BookingUseCase(store=store, catalog=catalog, notifier=notifier, availability=availability, timezone=TZ)

    assert uc.submit_public_booking(make_draft(), today=TODAY).ok
    assert uc.submit_public_booking(make_draft(date="20250310"), today=TODAY).ok
    third = uc.submit_public_booking(make_draft(date="20250310"), today=TODAY)

    assert third.error == ErrorKind.INVALID_INPUT
    assert "fully booked" in third.message
    assert availability.classify("2025-03-10", today=TODAY).value.booking_count == 2


def test_update_details_normalizes_date(bookings, availability):
    booking = bookings.create_staff_booking(make_draft(), staff="Nadia").value

    updated = bookings.update_details(booking.id, {"date": "20250312"}, staff="Nadia").value

    assert updated.date == "2025-03-12"
    assert availability.classify("2025-03-12", today=TODAY).value.booking_count == 1


def test_public_submission_requires_fields(bookings):
    for draft in (
        make_draft(client_name="  "),
        make_draft(client_phone=""),
        make_draft(date=""),
        make_draft(time="25:00"),
        make_draft(event_date="next friday"),
        make_draft(henna_by="someone"),
    ):
        result = bookings.submit_public_booking(draft, today=TODAY)
        assert not result.ok
        assert result.error == ErrorKind.INVALID_INPUT


def test_staff_booking_is_confirmed_with_price_snapshot(bookings):
    result = bookings.create_staff_booking(make_draft(selected_package="pkg_bridal"), staff="Nadia")

    assert result.ok
    assert result.value.status == BookingStatus.CONFIRMED
    assert result.value.package_price == 5_000_000
    assert result.value.last_updated_by == "Nadia"


def test_staff_booking_keeps_explicit_price(bookings):
    result = bookings.create_staff_booking(
        make_draft(selected_package="pkg_bridal", package_price=4_500_000), staff="Nadia"
    )
    assert result.value.package_price == 4_500_000


def test_any_status_can_move_to_any_other(bookings):
    booking = bookings.submit_public_booking(make_draft(), today=TODAY).value

    for status, staff in (
        (BookingStatus.CONFIRMED, "Nadia"),
        (BookingStatus.COMPLETED, "Rina"),
        (BookingStatus.PENDING, "Nadia"),
        (BookingStatus.CANCELLED, "Rina"),
        (BookingStatus.CONFIRMED, "Ayu"),
    ):
        result = bookings.update_status(booking.id, status, staff=staff)
        assert result.ok
        assert result.value.status == status
        assert result.value.last_updated_by == staff
        assert result.value.updated_at is not None


def test_confirming_snapshots_live_price_once(bookings, store):
    booking = bookings.submit_public_booking(make_draft(selected_package="pkg_bridal"), today=TODAY).value

    confirmed = bookings.update_status(booking.id, BookingStatus.CONFIRMED, staff="Nadia").value
    assert confirmed.package_price == 5_000_000

    store.update("packages", "pkg_bridal", {"price": 7_000_000})
    bookings.update_status(booking.id, BookingStatus.PENDING, staff="Nadia")
    again = bookings.update_status(booking.id, BookingStatus.CONFIRMED, staff="Nadia").value
    assert again.package_price == 5_000_000


def test_status_update_on_missing_booking(bookings):
    result = bookings.update_status("nope", BookingStatus.CONFIRMED, staff="Nadia")
    assert not result.ok
    assert result.error == ErrorKind.NOT_FOUND


def test_update_details_edits_fields(bookings):
    booking = bookings.submit_public_booking(make_draft(), today=TODAY).value

    result = bookings.update_details(
        booking.id, {"time": "13:30", "package_price": 6_000_000, "address": " Jl. Melati 5 "}, staff="Rina"
    )

    assert result.ok
    assert result.value.time == "13:30"
    assert result.value.package_price == 6_000_000
    assert result.value.address == "Jl. Melati 5"
    assert result.value.last_updated_by == "Rina"


def test_update_details_rejects_unknown_and_invalid(bookings):
    booking = bookings.submit_public_booking(make_draft(), today=TODAY).value

    assert bookings.update_details(booking.id, {"status": "Paid"}, staff="Rina").error == ErrorKind.INVALID_INPUT
    assert bookings.update_details(booking.id, {"package_price": -1}, staff="Rina").error == ErrorKind.INVALID_INPUT
    assert bookings.update_details("missing", {"time": "11:00"}, staff="Rina").error == ErrorKind.NOT_FOUND


def test_list_bookings_by_status(bookings):
    first = bookings.submit_public_booking(make_draft(date="2025-03-12"), today=TODAY).value
    bookings.submit_public_booking(make_draft(date="2025-03-11"), today=TODAY)
    bookings.update_status(first.id, BookingStatus.CONFIRMED, staff="Nadia")

    everything = bookings.list_bookings().value
    assert [b.date for b in everything] == ["2025-03-11", "2025-03-12"]

    confirmed = bookings.list_bookings(BookingStatus.CONFIRMED).value
    assert [b.id for b in confirmed] == [first.id]


def test_delete_is_irreversible(bookings):
    booking = bookings.submit_public_booking(make_draft(), today=TODAY).value

    assert bookings.delete_booking(booking.id, staff="Nadia").ok
    assert bookings.get_booking(booking.id).error == ErrorKind.NOT_FOUND
    assert bookings.delete_booking(booking.id, staff="Nadia").error == ErrorKind.NOT_FOUND
