from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from services.booking.domain.service import calculate_refund_amount
from services.booking.domain.value_object import FinancePolicy, RefundBand
from services.shared.domain import InvalidArgumentException

START = datetime(2025, 7, 1, 0, 0, tzinfo=timezone.utc)


def _days_before(days: float) -> datetime:
    return START - timedelta(days=days)


class TestCalculateRefundAmount:
    @pytest.mark.parametrize(
        "days_before, expected",
        [
            (20, Decimal("1000.00")),
            (10, Decimal("500.00")),
            (3, Decimal("250.00")),
            (0, Decimal("0.00")),
        ],
    )
    def test_refund_bands(self, create_booking, days_before, expected):
        booking = create_booking(amount_paid=1000)
        assert calculate_refund_amount(booking, _days_before(days_before)) == expected

    @pytest.mark.parametrize(
        "days_before, expected",
        [
            (14, Decimal("1000.00")),
            (13.99, Decimal("500.00")),
            (7, Decimal("500.00")),
            (6.99, Decimal("250.00")),
            (2, Decimal("250.00")),
            (1.5, Decimal("0.00")),
            (-1, Decimal("0.00")),
        ],
    )
    def test_band_boundaries(self, create_booking, days_before, expected):
        booking = create_booking(amount_paid=1000)
        assert calculate_refund_amount(booking, _days_before(days_before)) == expected

    def test_rounds_half_up_to_cents(self, create_booking):
        booking = create_booking(amount_paid=333.33)

        assert calculate_refund_amount(booking, _days_before(10)) == Decimal("166.67")
        assert calculate_refund_amount(booking, _days_before(3)) == Decimal("83.33")

    @pytest.mark.parametrize(
        "amount_paid, days_before, expected",
        [
            (4.02, 3, Decimal("1.00")),
            (10.05, 10, Decimal("5.03")),
        ],
    )
    def test_rounds_binary_float_product(self, create_booking, amount_paid, days_before, expected):
        booking = create_booking(amount_paid=amount_paid)
        assert calculate_refund_amount(booking, _days_before(days_before)) == expected

    def test_same_schedule_regardless_of_cancellation_policy(self, create_booking):
        # ガイドのポリシー（STRICT など）に関係なく 14 / 7 / 2 日の返金帯を適用する
        booking = create_booking(amount_paid=800)
        assert calculate_refund_amount(booking, _days_before(10)) == Decimal("400.00")
        assert calculate_refund_amount(booking, _days_before(1)) == Decimal("0.00")

    def test_refunded_booking_returns_recorded_refund(self, create_booking):
        booking = create_booking(status="refunded", refund_amount=150)

        assert calculate_refund_amount(booking, _days_before(20)) == Decimal("150")
        assert calculate_refund_amount(booking, _days_before(0)) == Decimal("150")

    def test_cancelled_booking_without_recorded_refund_returns_zero(self, create_booking):
        booking = create_booking(status="cancelled", refund_amount=None)
        assert calculate_refund_amount(booking, _days_before(20)) == Decimal("0")

    @pytest.mark.parametrize("amount_paid", [0, None])
    def test_nothing_paid_returns_zero(self, create_booking, amount_paid):
        booking = create_booking(amount_paid=amount_paid)
        assert calculate_refund_amount(booking, _days_before(20)) == Decimal("0")

    def test_negative_amount_paid_returns_zero(self, create_booking):
        booking = create_booking(amount_paid=-10)
        assert calculate_refund_amount(booking, _days_before(20)) == Decimal("0")

    def test_accepts_iso_string_for_cancelled_at(self, create_booking_record):
        record = create_booking_record(amount_paid=1000)
        assert calculate_refund_amount(record, "2025-06-21T00:00:00Z") == Decimal("500.00")

    def test_uses_injected_policy(self, create_booking):
        policy = FinancePolicy(
            refund_bands=(
                RefundBand(min_days=30, refund_rate=Decimal("1.00")),
                RefundBand(min_days=0, refund_rate=Decimal("0.10")),
            )
        )
        booking = create_booking(amount_paid=1000)
        assert calculate_refund_amount(booking, _days_before(20), policy=policy) == Decimal(
            "100.00"
        )

    @pytest.mark.parametrize("cancelled_at", ["yesterday", None, 0])
    def test_invalid_cancelled_at_raises_error(self, create_booking, cancelled_at):
        with pytest.raises(InvalidArgumentException) as exc_info:
            calculate_refund_amount(create_booking(), cancelled_at)
        assert exc_info.value.argument == "cancelled_at"

    def test_malformed_booking_raises_error(self):
        with pytest.raises(InvalidArgumentException):
            calculate_refund_amount({"id": "booking-001"}, START)

    @pytest.mark.parametrize("start_date", ["someday", None])
    def test_unparseable_start_date_refunds_nothing(self, create_booking, start_date):
        booking = create_booking(start_date=start_date, amount_paid=1000)
        assert calculate_refund_amount(booking, START) == Decimal("0.00")
