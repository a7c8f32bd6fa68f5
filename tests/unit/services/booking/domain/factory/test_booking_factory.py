import re
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentType
from services.booking.domain.factory import BookingFactory, as_booking
from services.booking.domain.value_object import ClientDetails
from services.shared.domain import InvalidArgumentException
from services.shared.utils import fixed_clock


class TestBookingFactoryReconstruct:
    def test_reconstructs_booking(self, create_booking_record):
        booking = BookingFactory().reconstruct(create_booking_record())

        assert isinstance(booking, Booking)
        assert booking.id == "booking-001"
        assert booking.booking_number == "BK-1001"
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.start_date == "2025-07-01T00:00:00Z"
        assert booking.start_time == "08:00"
        assert booking.participants == 2
        assert booking.total_price == Decimal("1000")
        assert booking.amount_paid == Decimal("1000")
        assert booking.refund_amount is None
        assert booking.payment_type == PaymentType.FULL
        assert booking.client_details == ClientDetails(
            name="Jane Doe", email="jane@example.com", phone="+1-907-555-0100"
        )
        assert booking.client_name == "Jane Doe"

    def test_optional_fields_default(self, create_booking_record):
        record = create_booking_record(
            amount_paid=None, client_details=None, payment_type=None, participants=None
        )
        booking = BookingFactory().reconstruct(record)

        assert booking.amount_paid == Decimal("0")
        assert booking.client_details is None
        assert booking.client_name is None
        assert booking.payment_type is None
        assert booking.participants is None

    @pytest.mark.parametrize("overrides", [{"start_date": None}, {}])
    def test_missing_start_date_is_kept_as_none(self, create_booking_record, overrides):
        record = create_booking_record(**overrides)
        if not overrides:
            del record["start_date"]
        assert BookingFactory().reconstruct(record).start_date is None

    def test_unparseable_start_date_is_kept_as_is(self, create_booking_record):
        booking = BookingFactory().reconstruct(create_booking_record(start_date="soon"))
        assert booking.start_date == "soon"

    def test_datetime_start_date_is_stored_as_iso_string(self, create_booking_record):
        start = datetime(2025, 7, 1, 8, 0, tzinfo=timezone.utc)
        booking = BookingFactory().reconstruct(create_booking_record(start_date=start))
        assert booking.start_date == "2025-07-01T08:00:00+00:00"

    @pytest.mark.parametrize(
        "overrides, argument",
        [
            ({"id": None}, "booking.id"),
            ({"id": "  "}, "booking.id"),
            ({"booking_number": ""}, "booking.booking_number"),
            ({"status": "checked_in"}, "booking.status"),
            ({"status": None}, "booking.status"),
            ({"start_date": 20250701}, "booking.start_date"),
            ({"participants": "2"}, "booking.participants"),
            ({"participants": True}, "booking.participants"),
            ({"total_price": "1000"}, "booking.total_price"),
            ({"amount_paid": float("nan")}, "booking.amount_paid"),
            ({"refund_amount": "150"}, "booking.refund_amount"),
            ({"client_details": "Jane"}, "booking.client_details"),
            ({"payment_type": "crypto"}, "booking.payment_type"),
        ],
    )
    def test_malformed_record_raises_error(self, create_booking_record, overrides, argument):
        with pytest.raises(InvalidArgumentException) as exc_info:
            BookingFactory().reconstruct(create_booking_record(**overrides))
        assert exc_info.value.argument == argument

    @pytest.mark.parametrize("record", [None, "booking-001", ["booking-001"]])
    def test_non_mapping_raises_error(self, record):
        with pytest.raises(InvalidArgumentException, match="must be a booking record"):
            BookingFactory().reconstruct(record)


class TestNewBookingNumber:
    def test_format(self):
        clock = fixed_clock(datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc))
        booking_number = BookingFactory().new_booking_number(clock)

        assert re.fullmatch(r"BK-1717243200000-[0-9A-Z]{9}", booking_number)

    def test_numbers_differ(self, clock):
        factory = BookingFactory()
        assert factory.new_booking_number(clock) != factory.new_booking_number(clock)


class TestAsBooking:
    def test_returns_booking_as_is(self, create_booking):
        booking = create_booking()
        assert as_booking(booking) is booking

    def test_reconstructs_from_record(self, create_booking_record):
        assert as_booking(create_booking_record()).id == "booking-001"
