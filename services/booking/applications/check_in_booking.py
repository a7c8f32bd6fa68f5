from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from services.booking.domain.entity import Booking
from services.booking.domain.factory import as_booking
from services.booking.domain.service import (
    generate_check_in_qr_data,
    generate_verification_code,
    verify_check_in_code,
    verify_check_in_payload,
)
from services.shared.domain import InvalidArgumentException
from services.shared.utils import Clock, utc_now


@dataclass(frozen=True)
class CheckInPass:
    """チェックイン用の QR データと手入力用コード"""

    qr_data: str
    verification_code: str


class CheckInService:
    """チェックインサービス（QR 発行・照合）"""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def issue(self, booking: Booking | Mapping[str, Any]) -> CheckInPass:
        """チェックイン用の QR データを発行する"""
        booking = as_booking(booking)
        return CheckInPass(
            qr_data=generate_check_in_qr_data(booking, clock=self._clock),
            verification_code=generate_verification_code(
                booking.id, booking.booking_number
            ),
        )

    def verify(
        self,
        booking: Booking | Mapping[str, Any],
        code: str | None = None,
        qr_data: str | None = None,
    ) -> bool:
        """手入力コード、または読み取った QR データを照合する"""
        if qr_data is not None:
            return verify_check_in_payload(booking, qr_data)
        if code is None:
            raise InvalidArgumentException("code", "code or qr_data is required")
        return verify_check_in_code(booking, code)
