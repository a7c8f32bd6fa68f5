import json
from collections.abc import Mapping
from typing import Any

from services.booking.domain.entity import Booking
from services.booking.domain.factory import as_booking
from services.booking.domain.value_object import VerificationCode
from services.shared.domain import (
    ComputationFailureException,
    InvalidArgumentException,
    IsoDateTime,
)
from services.shared.utils import Clock, get_logger, utc_now

logger = get_logger("booking-check-in")

UNKNOWN_CLIENT_NAME = "Unknown"
_REQUIRED_PAYLOAD_KEYS = ("bookingId", "bookingNumber", "verificationCode")


def generate_verification_code(booking_id: str, booking_number: str) -> str:
    """予約 ID と予約番号から 8 文字の照合コードを生成する"""
    return VerificationCode.for_booking(booking_id, booking_number).value


def generate_check_in_qr_data(
    booking: Booking | Mapping[str, Any], *, clock: Clock = utc_now
) -> str:
    """チェックイン用 QR コードに埋め込む JSON 文字列を生成する

    Raises:
        InvalidArgumentException: id / booking_number が無い場合
        ComputationFailureException: データの組み立てに失敗した場合
    """
    booking = as_booking(booking)
    if not booking.id or not booking.booking_number:
        raise InvalidArgumentException(
            "booking", "must have id and booking_number"
        )

    try:
        qr_data = {
            "bookingId": booking.id,
            "bookingNumber": booking.booking_number,
            "clientName": booking.client_name or UNKNOWN_CLIENT_NAME,
            "guideId": booking.guide_id,
            "serviceId": booking.service_id,
            "startDate": booking.start_date,
            "startTime": booking.start_time,
            "participants": booking.participants,
            "status": booking.status.value,
            "verificationCode": generate_verification_code(
                booking.id, booking.booking_number
            ),
            "generatedAt": IsoDateTime.from_value(clock()).to_utc_millis_string(),
        }
        return json.dumps(qr_data, separators=(",", ":"), ensure_ascii=False)
    except Exception as e:
        logger.exception("Error generating QR data", extra={"booking_id": booking.id})
        raise ComputationFailureException(
            "Failed to generate check-in QR code data"
        ) from e


def parse_check_in_qr_data(payload: str) -> dict[str, Any]:
    """読み取った QR コードの JSON を解析する"""
    try:
        data = json.loads(payload)
    except (TypeError, json.JSONDecodeError) as e:
        raise InvalidArgumentException("qr_data", "must be a JSON string") from e

    if not isinstance(data, dict):
        raise InvalidArgumentException("qr_data", "must be a JSON object")
    missing = [key for key in _REQUIRED_PAYLOAD_KEYS if not data.get(key)]
    if missing:
        raise InvalidArgumentException(
            "qr_data", f"missing fields: {', '.join(missing)}"
        )
    return data


def verify_check_in_code(booking: Booking | Mapping[str, Any], code: str) -> bool:
    """ガイドが入力（またはスキャン）したコードが予約と一致するか"""
    booking = as_booking(booking)
    if not isinstance(code, str) or not code.strip():
        raise InvalidArgumentException("code", "Please enter a check-in code")
    expected = VerificationCode.for_booking(booking.id, booking.booking_number)
    return expected.matches(code)


def verify_check_in_payload(booking: Booking | Mapping[str, Any], payload: str) -> bool:
    """QR コードの内容がこの予約のものであり、照合コードが一致するか"""
    booking = as_booking(booking)
    data = parse_check_in_qr_data(payload)
    if data["bookingId"] != booking.id or data["bookingNumber"] != booking.booking_number:
        return False
    return verify_check_in_code(booking, str(data["verificationCode"]))
