from .client_details import ClientDetails
from .finance_policy import (
    DEFAULT_FINANCE_POLICY,
    DEFAULT_FULL_REFUND_LEAD_TIMES,
    DEFAULT_REFUND_BANDS,
    FinancePolicy,
    RefundBand,
)
from .initial_payment import InitialPayment
from .payment_breakdown import PaymentBreakdown
from .verification_code import VerificationCode, string_hash32

__all__ = [
    "ClientDetails",
    "FinancePolicy",
    "RefundBand",
    "DEFAULT_FINANCE_POLICY",
    "DEFAULT_REFUND_BANDS",
    "DEFAULT_FULL_REFUND_LEAD_TIMES",
    "InitialPayment",
    "PaymentBreakdown",
    "VerificationCode",
    "string_hash32",
]
