from collections.abc import Callable, Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from services.booking.domain.entity import Booking
from services.booking.domain.enum import CancellationPolicyType, PaymentType
from services.booking.domain.factory import as_booking
from services.booking.domain.value_object import (
    DEFAULT_FINANCE_POLICY,
    FinancePolicy,
    InitialPayment,
    PaymentBreakdown,
)
from services.shared.domain import (
    InvalidArgumentException,
    IsoDateTime,
    round_cents,
    to_cents,
)
from services.shared.utils import (
    Clock,
    get_logger,
    require_instant,
    require_non_negative_number,
    utc_now,
)

logger = get_logger("booking-finance")

BookingLike = Booking | Mapping[str, Any]


def calculate_payment_breakdown(
    total_price: object, *, policy: FinancePolicy = DEFAULT_FINANCE_POLICY
) -> PaymentBreakdown:
    """支払い内訳を計算する

    - デポジット = 合計 × デポジット率、残金 = 合計 − デポジット
    - 手数料 = 合計 × 手数料率（デポジットではなく合計から算出）、ガイド受取額 = 合計 − 手数料

    各金額は float で計算してからセント単位に丸める（既存の見積もり結果と一致させるため）。

    Raises:
        InvalidArgumentException: 数値でない・NaN・負数の場合
    """
    total = float(require_non_negative_number(total_price, "total_price"))

    deposit_amount = round_cents(total * float(policy.deposit_rate))
    platform_fee = round_cents(total * float(policy.platform_fee_rate))

    return PaymentBreakdown(
        total_price=to_cents(round_cents(total)),
        deposit_amount=to_cents(deposit_amount),
        remainder_amount=to_cents(round_cents(total - deposit_amount)),
        platform_fee=to_cents(platform_fee),
        guide_payout=to_cents(round_cents(total - platform_fee)),
    )


def calculate_initial_payment(
    total_price: object,
    payment_type: PaymentType | str,
    deposit_percentage: object = None,
    *,
    policy: FinancePolicy = DEFAULT_FINANCE_POLICY,
) -> InitialPayment:
    """予約時に請求する金額と未払い残高を計算する

    FULL は全額、DEPOSIT / INSTALLMENT はサービスのデポジット率
    （未設定ならポリシーのデポジット率）を請求する。
    """
    total = round_cents(float(require_non_negative_number(total_price, "total_price")))
    try:
        payment_type = PaymentType(payment_type)
    except ValueError as e:
        raise InvalidArgumentException(
            "payment_type", f"unknown payment type: {payment_type!r}"
        ) from e

    if payment_type == PaymentType.FULL:
        return InitialPayment(amount_paid=to_cents(total), amount_due=Decimal("0.00"))

    if deposit_percentage is None:
        rate = float(policy.deposit_rate)
    else:
        percentage = require_non_negative_number(deposit_percentage, "deposit_percentage")
        if percentage > 100:
            raise InvalidArgumentException(
                "deposit_percentage", "must not exceed 100"
            )
        rate = float(percentage) / 100

    amount_paid = round_cents(total * rate)
    return InitialPayment(
        amount_paid=to_cents(amount_paid),
        amount_due=to_cents(round_cents(total - amount_paid)),
    )


def get_cancellation_deadline(
    booking_date: datetime | str,
    policy_type: CancellationPolicyType | str,
    *,
    policy: FinancePolicy = DEFAULT_FINANCE_POLICY,
) -> datetime:
    """キャンセルポリシーに応じた全額返金の期限を返す

    SUPER_STRICT は 50% 返金の境界、NON_REFUNDABLE は予約日時そのもの。
    未知のポリシーは MODERATE として扱う。

    Raises:
        InvalidArgumentException: booking_date が日時として解釈できない場合
    """
    start = require_instant(booking_date, "booking_date")
    lead_time = policy.lead_time_for(resolve_cancellation_policy(policy_type, policy=policy))
    return start.minus(lead_time).value


def resolve_cancellation_policy(
    value: CancellationPolicyType | str,
    *,
    policy: FinancePolicy = DEFAULT_FINANCE_POLICY,
) -> CancellationPolicyType:
    """キャンセルポリシーを解決する（未知の値は警告ログを出してフォールバック）"""
    try:
        return CancellationPolicyType(value)
    except ValueError:
        logger.warning(
            "Unknown cancellation policy; falling back",
            extra={"policy": str(value), "fallback": policy.fallback_policy.value},
        )
        return policy.fallback_policy


def can_cancel_booking(
    booking: BookingLike,
    *,
    clock: Clock = utc_now,
    on_unparseable_start_date: Callable[[Booking], None] | None = None,
) -> bool:
    """予約をキャンセルできるかどうか

    キャンセル済み・完了・返金済み、または開始日時を過ぎた予約は不可。
    start_date が解釈できない場合は例外にせずキャンセル可とする
    （データ品質の問題として警告ログとフックで通知する）。
    """
    booking = as_booking(booking)

    if booking.is_closed():
        return False

    try:
        start = IsoDateTime.from_string(booking.start_date)
    except ValueError:
        _report_unparseable_start_date(booking, on_unparseable_start_date)
        return True

    return not start.is_before(IsoDateTime.from_value(clock()))


def calculate_refund_amount(
    booking: BookingLike,
    cancelled_at: datetime | str,
    *,
    policy: FinancePolicy = DEFAULT_FINANCE_POLICY,
) -> Decimal:
    """キャンセル時の返金額を計算する

    予約のキャンセルポリシーは参照せず、予約日までの日数による
    共通の返金帯（14 日 / 7 日 / 2 日）を適用する。
    キャンセル済み・返金済みの予約は記録済みの返金額をそのまま返す。
    start_date が解釈できない場合はどの返金帯にも該当しないため 0 を返す。

    Raises:
        InvalidArgumentException: booking または cancelled_at が不正な場合
    """
    booking = as_booking(booking)
    cancelled = require_instant(cancelled_at, "cancelled_at")

    if booking.is_settled_by_cancellation():
        return booking.refund_amount or Decimal("0")

    if booking.amount_paid <= 0:
        return Decimal("0")

    try:
        start = IsoDateTime.from_string(booking.start_date)
    except ValueError:
        logger.warning(
            "Unparseable booking start_date; no refund band applies",
            extra={"booking_id": booking.id, "start_date": booking.start_date},
        )
        return Decimal("0.00")

    rate = policy.refund_rate_for(start.days_since(cancelled))
    refund = to_cents(round_cents(float(booking.amount_paid) * float(rate)))
    return max(Decimal("0"), refund)


def _report_unparseable_start_date(
    booking: Booking, hook: Callable[[Booking], None] | None
) -> None:
    logger.warning(
        "Unparseable booking start_date; allowing cancellation",
        extra={"booking_id": booking.id, "start_date": booking.start_date},
    )
    if hook is not None:
        hook(booking)
