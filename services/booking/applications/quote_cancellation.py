from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from services.booking.domain.entity import Booking
from services.booking.domain.enum import CancellationPolicyType
from services.booking.domain.factory import as_booking
from services.booking.domain.service import (
    calculate_refund_amount,
    can_cancel_booking,
    get_cancellation_deadline,
    resolve_cancellation_policy,
)
from services.booking.domain.value_object import DEFAULT_FINANCE_POLICY, FinancePolicy
from services.shared.domain import Money
from services.shared.utils import Clock, get_logger, utc_now

logger = get_logger("booking-cancellation")


@dataclass(frozen=True)
class CancellationQuote:
    """キャンセル見積もり（キャンセル可否・返金額・全額返金期限）"""

    can_cancel: bool
    refund_amount: Money
    deadline: datetime | None = None
    policy_type: CancellationPolicyType | None = None


class QuoteCancellationService:
    """キャンセル見積もりサービス

    返金額は予約のキャンセルポリシーに関わらず共通の返金帯で計算する。
    ポリシーが指定された場合は全額返金期限のみ併せて返す。
    """

    def __init__(
        self,
        policy: FinancePolicy = DEFAULT_FINANCE_POLICY,
        clock: Clock = utc_now,
    ) -> None:
        self._policy = policy
        self._clock = clock

    def quote(
        self,
        booking: Booking | Mapping[str, Any],
        cancelled_at: datetime | str | None = None,
        policy_type: CancellationPolicyType | str | None = None,
    ) -> CancellationQuote:
        booking = as_booking(booking)
        if cancelled_at is None:
            cancelled_at = self._clock()

        can_cancel = can_cancel_booking(
            booking,
            clock=self._clock,
            on_unparseable_start_date=self._flag_data_quality,
        )
        refund_amount = (
            calculate_refund_amount(booking, cancelled_at, policy=self._policy)
            if can_cancel
            else booking.refund_amount
        )

        deadline = None
        resolved_policy_type = None
        if policy_type is not None:
            resolved_policy_type = resolve_cancellation_policy(policy_type, policy=self._policy)
            deadline = get_cancellation_deadline(
                booking.start_date, resolved_policy_type, policy=self._policy
            )

        return CancellationQuote(
            can_cancel=can_cancel,
            refund_amount=Money.usd(refund_amount or 0).rounded(),
            deadline=deadline,
            policy_type=resolved_policy_type,
        )

    @staticmethod
    def _flag_data_quality(booking: Booking) -> None:
        logger.warning(
            "Data quality: booking start_date could not be parsed",
            extra={"booking_id": booking.id, "booking_number": booking.booking_number},
        )
