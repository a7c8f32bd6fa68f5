from .entity import Booking
from .enum import BookingStatus, CancellationPolicyType, PaymentType
from .factory import BookingFactory, as_booking
from .value_object import (
    DEFAULT_FINANCE_POLICY,
    ClientDetails,
    FinancePolicy,
    InitialPayment,
    PaymentBreakdown,
    RefundBand,
    VerificationCode,
)

__all__ = [
    "Booking",
    "BookingStatus",
    "CancellationPolicyType",
    "PaymentType",
    "BookingFactory",
    "as_booking",
    "ClientDetails",
    "FinancePolicy",
    "RefundBand",
    "DEFAULT_FINANCE_POLICY",
    "InitialPayment",
    "PaymentBreakdown",
    "VerificationCode",
]
