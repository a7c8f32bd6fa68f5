import secrets
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentType
from services.booking.domain.value_object import ClientDetails
from services.shared.domain import InvalidArgumentException
from services.shared.utils import Clock, require_number, utc_now

_BOOKING_NUMBER_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_BOOKING_NUMBER_SUFFIX_LENGTH = 9


class BookingFactory:
    """予約エンティティのファクトリ

    - 外部（永続化層）のレコードから Booking を再構築する
    - プリミティブ型の検証と Value Object への変換
    - 新規予約番号の採番
    """

    def reconstruct(self, record: Mapping[str, Any]) -> Booking:
        """保存済みレコードから予約エンティティを再構築する

        Raises:
            InvalidArgumentException: レコードの形式が不正な場合
        """
        if not isinstance(record, Mapping):
            raise InvalidArgumentException("booking", "must be a booking record")

        return Booking(
            id=self._required_text(record, "id"),
            booking_number=self._required_text(record, "booking_number"),
            status=self._status(record.get("status")),
            start_date=self._start_date(record.get("start_date")),
            start_time=self._optional_text(record, "start_time"),
            participants=self._participants(record.get("participants")),
            total_price=require_number(record.get("total_price"), "booking.total_price"),
            amount_paid=self._optional_amount(record, "amount_paid") or Decimal("0"),
            refund_amount=self._optional_amount(record, "refund_amount"),
            guide_id=self._optional_text(record, "guide_id"),
            service_id=self._optional_text(record, "service_id"),
            client_details=self._client_details(record.get("client_details")),
            client_id=self._optional_text(record, "client_id"),
            payment_type=self._payment_type(record.get("payment_type")),
        )

    def new_booking_number(self, clock: Clock = utc_now) -> str:
        """予約番号を採番する（例: BK-1717243200000-3F9K2LQ8Z）"""
        epoch_millis = int(clock().timestamp() * 1000)
        suffix = "".join(
            secrets.choice(_BOOKING_NUMBER_ALPHABET)
            for _ in range(_BOOKING_NUMBER_SUFFIX_LENGTH)
        )
        return f"BK-{epoch_millis}-{suffix}"

    @staticmethod
    def _required_text(record: Mapping[str, Any], key: str) -> str:
        value = record.get(key)
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentException(f"booking.{key}", "is required")
        return value

    @staticmethod
    def _optional_text(record: Mapping[str, Any], key: str) -> str | None:
        value = record.get(key)
        if value is None:
            return None
        return str(value)

    @staticmethod
    def _optional_amount(record: Mapping[str, Any], key: str) -> Decimal | None:
        value = record.get(key)
        if value is None:
            return None
        return require_number(value, f"booking.{key}")

    @staticmethod
    def _status(value: object) -> BookingStatus:
        try:
            return BookingStatus(value)
        except ValueError as e:
            raise InvalidArgumentException(
                "booking.status", f"unknown booking status: {value!r}"
            ) from e

    @staticmethod
    def _payment_type(value: object) -> PaymentType | None:
        if value is None:
            return None
        try:
            return PaymentType(value)
        except ValueError as e:
            raise InvalidArgumentException(
                "booking.payment_type", f"unknown payment type: {value!r}"
            ) from e

    @staticmethod
    def _start_date(value: object) -> str | None:
        # 未設定・解釈できない値もそのまま保持する（キャンセル判定は解釈失敗時も許可するため）
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.isoformat()
        if not isinstance(value, str):
            raise InvalidArgumentException("booking.start_date", "must be a date string")
        return value

    @staticmethod
    def _participants(value: object) -> int | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidArgumentException(
                "booking.participants", "must be a non-negative integer"
            )
        return value

    @staticmethod
    def _client_details(value: object) -> ClientDetails | None:
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise InvalidArgumentException(
                "booking.client_details", "must be an object"
            )
        return ClientDetails(
            name=value.get("name"),
            email=value.get("email"),
            phone=value.get("phone"),
        )


def as_booking(booking: Booking | Mapping[str, Any]) -> Booking:
    """Booking またはレコード（dict）を受け取り Booking を返す"""
    if isinstance(booking, Booking):
        return booking
    return BookingFactory().reconstruct(booking)
