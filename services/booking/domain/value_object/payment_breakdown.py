from dataclasses import dataclass, field
from decimal import Decimal

from services.shared.domain import Currency


@dataclass(frozen=True)
class PaymentBreakdown:
    """支払い内訳（デポジット・残金・プラットフォーム手数料・ガイド受取額）

    金額はすべてセント単位に丸め済み。
    """

    total_price: Decimal
    deposit_amount: Decimal
    remainder_amount: Decimal
    platform_fee: Decimal
    guide_payout: Decimal
    currency: Currency = field(default_factory=Currency.usd)
