from decimal import Decimal

from services.booking.domain.enum import BookingStatus, PaymentType
from services.booking.domain.value_object import ClientDetails
from services.shared.domain import Entity


class Booking(Entity[str]):
    """予約エンティティ（読み取り専用）

    予約の作成・更新・状態遷移は予約管理側が行う。
    ここでは料金計算・キャンセル判定・チェックインに必要な属性のみ保持する。
    start_date は保存されている文字列のまま保持し、利用時に解釈する。
    """

    def __init__(
        self,
        id: str,
        booking_number: str,
        status: BookingStatus,
        start_date: str | None,
        total_price: Decimal,
        amount_paid: Decimal = Decimal("0"),
        refund_amount: Decimal | None = None,
        start_time: str | None = None,
        participants: int | None = None,
        guide_id: str | None = None,
        service_id: str | None = None,
        client_details: ClientDetails | None = None,
        client_id: str | None = None,
        payment_type: PaymentType | None = None,
    ) -> None:
        super().__init__(id)
        self._booking_number = booking_number
        self._status = status
        self._start_date = start_date
        self._total_price = total_price
        self._amount_paid = amount_paid
        self._refund_amount = refund_amount
        self._start_time = start_time
        self._participants = participants
        self._guide_id = guide_id
        self._service_id = service_id
        self._client_details = client_details
        self._client_id = client_id
        self._payment_type = payment_type

    @property
    def booking_number(self) -> str:
        return self._booking_number

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def start_date(self) -> str | None:
        return self._start_date

    @property
    def start_time(self) -> str | None:
        return self._start_time

    @property
    def participants(self) -> int | None:
        return self._participants

    @property
    def total_price(self) -> Decimal:
        return self._total_price

    @property
    def amount_paid(self) -> Decimal:
        return self._amount_paid

    @property
    def refund_amount(self) -> Decimal | None:
        return self._refund_amount

    @property
    def guide_id(self) -> str | None:
        return self._guide_id

    @property
    def service_id(self) -> str | None:
        return self._service_id

    @property
    def client_details(self) -> ClientDetails | None:
        return self._client_details

    @property
    def client_id(self) -> str | None:
        return self._client_id

    @property
    def payment_type(self) -> PaymentType | None:
        return self._payment_type

    @property
    def client_name(self) -> str | None:
        if self._client_details is None:
            return None
        return self._client_details.display_name

    def is_closed(self) -> bool:
        """キャンセル・完了・返金済みのいずれかか"""
        return self._status in (
            BookingStatus.CANCELLED,
            BookingStatus.COMPLETED,
            BookingStatus.REFUNDED,
        )

    def is_settled_by_cancellation(self) -> bool:
        """キャンセル済み、または返金済みか"""
        return self._status in (BookingStatus.CANCELLED, BookingStatus.REFUNDED)
