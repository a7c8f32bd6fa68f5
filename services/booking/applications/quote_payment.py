from dataclasses import dataclass

from services.booking.domain.enum import PaymentType
from services.booking.domain.service import (
    calculate_initial_payment,
    calculate_payment_breakdown,
)
from services.booking.domain.value_object import (
    DEFAULT_FINANCE_POLICY,
    FinancePolicy,
    InitialPayment,
    PaymentBreakdown,
)


@dataclass(frozen=True)
class PaymentQuote:
    """予約時の支払い見積もり"""

    breakdown: PaymentBreakdown
    initial_payment: InitialPayment


class QuotePaymentService:
    """支払い見積もりサービス"""

    def __init__(self, policy: FinancePolicy = DEFAULT_FINANCE_POLICY) -> None:
        self._policy = policy

    def quote(
        self,
        total_price: object,
        payment_type: PaymentType | str = PaymentType.DEPOSIT,
        deposit_percentage: object = None,
    ) -> PaymentQuote:
        """支払い内訳と初回請求額を計算する"""
        breakdown = calculate_payment_breakdown(total_price, policy=self._policy)
        initial_payment = calculate_initial_payment(
            total_price, payment_type, deposit_percentage, policy=self._policy
        )
        return PaymentQuote(breakdown=breakdown, initial_payment=initial_payment)
