from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal

from services.booking.domain.enum import CancellationPolicyType


@dataclass(frozen=True)
class RefundBand:
    """キャンセル時の返金帯（予約日の min_days 日前以降なら refund_rate を返金）"""

    min_days: float
    refund_rate: Decimal


DEFAULT_REFUND_BANDS: tuple[RefundBand, ...] = (
    RefundBand(min_days=14, refund_rate=Decimal("1.00")),
    RefundBand(min_days=7, refund_rate=Decimal("0.50")),
    RefundBand(min_days=2, refund_rate=Decimal("0.25")),
)

DEFAULT_FULL_REFUND_LEAD_TIMES: dict[CancellationPolicyType, timedelta] = {
    CancellationPolicyType.FLEXIBLE: timedelta(hours=24),
    CancellationPolicyType.MODERATE: timedelta(days=5),
    CancellationPolicyType.STRICT: timedelta(days=14),
    # SUPER_STRICT は 30 日前が 50% 返金の境界
    CancellationPolicyType.SUPER_STRICT: timedelta(days=30),
    CancellationPolicyType.NON_REFUNDABLE: timedelta(0),
}


@dataclass(frozen=True)
class FinancePolicy:
    """料金・返金ルールの設定値

    - デポジット率 / プラットフォーム手数料率
    - 返金帯（日数の降順）
    - キャンセルポリシーごとの全額返金期限
    """

    deposit_rate: Decimal = Decimal("0.25")
    platform_fee_rate: Decimal = Decimal("0.05")
    refund_bands: tuple[RefundBand, ...] = DEFAULT_REFUND_BANDS
    full_refund_lead_times: dict[CancellationPolicyType, timedelta] = field(
        default_factory=lambda: dict(DEFAULT_FULL_REFUND_LEAD_TIMES)
    )
    fallback_policy: CancellationPolicyType = CancellationPolicyType.MODERATE

    def __post_init__(self) -> None:
        for name in ("deposit_rate", "platform_fee_rate"):
            rate = getattr(self, name)
            if not Decimal("0") <= rate <= Decimal("1"):
                raise ValueError(f"{name} must be between 0 and 1: {rate}")

        days = [band.min_days for band in self.refund_bands]
        if any(later >= earlier for earlier, later in zip(days, days[1:])):
            raise ValueError("refund_bands must be ordered by min_days descending")

        if self.fallback_policy not in self.full_refund_lead_times:
            raise ValueError(
                f"No lead time configured for fallback policy: {self.fallback_policy}"
            )

    def refund_rate_for(self, days_until_booking: float) -> Decimal:
        """予約日までの日数に応じた返金率（該当する帯が無ければ 0）"""
        for band in self.refund_bands:
            if days_until_booking >= band.min_days:
                return band.refund_rate
        return Decimal("0")

    def lead_time_for(self, policy_type: CancellationPolicyType) -> timedelta:
        return self.full_refund_lead_times.get(
            policy_type, self.full_refund_lead_times[self.fallback_policy]
        )


DEFAULT_FINANCE_POLICY = FinancePolicy()
