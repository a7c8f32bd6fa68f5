from typing import Any

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingFactory


@pytest.fixture
def create_booking_record():
    """予約レコード（dict）を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(**overrides: Any) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": "booking-001",
            "booking_number": "BK-1001",
            "client_id": "client-1",
            "guide_id": "guide-1",
            "service_id": "service-1",
            "status": "confirmed",
            "start_date": "2025-07-01T00:00:00Z",
            "start_time": "08:00",
            "participants": 2,
            "total_price": 1000,
            "amount_paid": 1000,
            "refund_amount": None,
            "payment_type": "full",
            "client_details": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "phone": "+1-907-555-0100",
            },
        }
        record.update(overrides)
        return record

    return _factory


@pytest.fixture
def create_booking(create_booking_record):
    """Booking を生成する Factory fixture"""

    def _factory(**overrides: Any) -> Booking:
        return BookingFactory().reconstruct(create_booking_record(**overrides))

    return _factory
